# Index for form schemas
from __future__ import annotations
__all__ = []
from .school_form import (
    SCHOOL_TYPE_LABELS, TIMEZONE_CHOICES, SchoolFormContactInfo, SchoolFormAddress,
    CreateSchoolForm, default_school_form,
)
__all__ += ['SCHOOL_TYPE_LABELS','TIMEZONE_CHOICES','SchoolFormContactInfo','SchoolFormAddress',
            'CreateSchoolForm','default_school_form']
