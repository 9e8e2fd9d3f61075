# Index for people schemas
from __future__ import annotations
__all__ = []
from .staff_analytics import (
    RoleOutcomeMetrics, ComprehensiveRatioTrend, PeopleStats, StaffProfileSummary,
    PeopleDashboardData,
)
__all__ += ['RoleOutcomeMetrics','ComprehensiveRatioTrend','PeopleStats','StaffProfileSummary',
            'PeopleDashboardData']
from .staff_comprehensive import (
    StaffPerformanceMetrics, ClassroomAssignment, RetentionData, ComprehensiveStaffProfile,
)
__all__ += ['StaffPerformanceMetrics','ClassroomAssignment','RetentionData','ComprehensiveStaffProfile']
