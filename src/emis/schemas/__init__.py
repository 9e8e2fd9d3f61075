# Index for all EMIS schemas, grouped by layer
from __future__ import annotations
__all__ = []
from .base import *  # noqa: F401,F403
from .base import __all__ as _base_all
__all__ += _base_all
from .human_resources import *  # noqa: F401,F403
from .human_resources import __all__ as _human_resources_all
__all__ += _human_resources_all
from .school import *  # noqa: F401,F403
from .school import __all__ as _school_all
__all__ += _school_all
from .students import *  # noqa: F401,F403
from .students import __all__ as _students_all
__all__ += _students_all
from .financial import *  # noqa: F401,F403
from .financial import __all__ as _financial_all
__all__ += _financial_all
from .administrative import *  # noqa: F401,F403
from .administrative import __all__ as _administrative_all
__all__ += _administrative_all
from .learning_outcomes import *  # noqa: F401,F403
from .learning_outcomes import __all__ as _learning_outcomes_all
__all__ += _learning_outcomes_all
from .accountability import *  # noqa: F401,F403
from .accountability import __all__ as _accountability_all
__all__ += _accountability_all
from .efficiency import *  # noqa: F401,F403
from .efficiency import __all__ as _efficiency_all
__all__ += _efficiency_all
from .data_quality import *  # noqa: F401,F403
from .data_quality import __all__ as _data_quality_all
__all__ += _data_quality_all
from .people import *  # noqa: F401,F403
from .people import __all__ as _people_all
__all__ += _people_all
from .analytics import *  # noqa: F401,F403
from .analytics import __all__ as _analytics_all
__all__ += _analytics_all
from .forms import *  # noqa: F401,F403
from .forms import __all__ as _forms_all
__all__ += _forms_all
