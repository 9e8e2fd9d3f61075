# Index for school schemas
from __future__ import annotations
__all__ = []
from .school import SchoolType, SchoolStatus, GradeRange, AccreditationInfo, SchoolProfileSummary
__all__ += ['SchoolType','SchoolStatus','GradeRange','AccreditationInfo','SchoolProfileSummary']
from .comprehensive import ComprehensiveSchoolProfile
__all__ += ['ComprehensiveSchoolProfile']
