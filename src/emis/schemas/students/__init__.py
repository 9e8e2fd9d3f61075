# Index for student schemas
from __future__ import annotations
__all__ = []
from .student import (
    BloodType, StudentStatus, StudentContact, StudentMedical, ClassAttendance, StudentClass,
    StudentPerformanceData, StudentProfileSummary,
)
__all__ += ['BloodType','StudentStatus','StudentContact','StudentMedical','ClassAttendance','StudentClass',
            'StudentPerformanceData','StudentProfileSummary']
from .enrollment import (
    EnrollmentStats, RecentActivity, EnrollmentAlert, EnrollmentTrendData,
    GradeDistributionData, CompletionFunnelData, StatusBreakdownData,
    EnrollmentDashboardAnalytics, EnrollmentDashboardData,
)
__all__ += ['EnrollmentStats','RecentActivity','EnrollmentAlert','EnrollmentTrendData',
            'GradeDistributionData','CompletionFunnelData','StatusBreakdownData',
            'EnrollmentDashboardAnalytics','EnrollmentDashboardData']
from .comprehensive import ComprehensiveStudentProfile
__all__ += ['ComprehensiveStudentProfile']
