# Index for accountability schemas
from __future__ import annotations
__all__ = []
from .delegating import Delegation
__all__ += ['Delegation']
from .financing import FinancingRelationship
__all__ += ['FinancingRelationship']
from .performing import PerformanceAccountability
__all__ += ['PerformanceAccountability']
from .informing import InformationDissemination
__all__ += ['InformationDissemination']
from .enforcing import EnforcementAction
__all__ += ['EnforcementAction']
from .relationships import (
    AccountabilityRelationshipType, AccountabilityRelationship, AccountabilityAnalytics,
)
__all__ += ['AccountabilityRelationshipType','AccountabilityRelationship','AccountabilityAnalytics']
