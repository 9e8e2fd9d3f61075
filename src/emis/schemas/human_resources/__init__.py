# Index for human-resources schemas
from __future__ import annotations
__all__ = []
from .staff import (
    Gender, EmploymentType, EmploymentStatus, StaffRoleType,
    StaffRole, EducationRecord, Qualifications, Employment, Staff,
)
__all__ += ['Gender','EmploymentType','EmploymentStatus','StaffRoleType',
            'StaffRole','EducationRecord','Qualifications','Employment','Staff']
from .staff_roles import RoleAssignment, RoleDistribution, RoleTrend, RoleVacancy, RoleAnalytics
__all__ += ['RoleAssignment','RoleDistribution','RoleTrend','RoleVacancy','RoleAnalytics']
from .salary import (
    SalaryScaleLevel, SalaryStructure, Allowance, Deduction, StaffSalaryRecord,
    RoleSalaryBreakdown, SalaryBand, SalaryTrend, SalaryAnalytics,
)
__all__ += ['SalaryScaleLevel','SalaryStructure','Allowance','Deduction','StaffSalaryRecord',
            'RoleSalaryBreakdown','SalaryBand','SalaryTrend','SalaryAnalytics']
from .professional_development import (
    ProfessionalDevelopmentType, ProfessionalDevelopmentRecord, Certification,
    ProfessionalDevelopmentAllowance, ProfessionalDevelopmentAnalytics,
)
__all__ += ['ProfessionalDevelopmentType','ProfessionalDevelopmentRecord','Certification',
            'ProfessionalDevelopmentAllowance','ProfessionalDevelopmentAnalytics']
from .experience import ExperienceRecord, TeachingExperience, ExperienceSummary
__all__ += ['ExperienceRecord','TeachingExperience','ExperienceSummary']
from .conditional_cash_transfer import ConditionalCashTransfer, ConditionalCashTransferAnalytics
__all__ += ['ConditionalCashTransfer','ConditionalCashTransferAnalytics']
from .ministry_finance import MinistryFinanceHRRecord, MinistryFinanceHRSync
__all__ += ['MinistryFinanceHRRecord','MinistryFinanceHRSync']
from .capacity_building import (
    CapacityBuildingProgram, RetentionStrategy, TurnoverRecord,
    CapacityBuildingAnalytics, RetentionAnalytics,
)
__all__ += ['CapacityBuildingProgram','RetentionStrategy','TurnoverRecord',
            'CapacityBuildingAnalytics','RetentionAnalytics']
from .onboarding import (
    OnboardingStats, OnboardingActivity, OnboardingTrend, DepartmentRoleBreakdown,
    OnboardingDashboardData,
)
__all__ += ['OnboardingStats','OnboardingActivity','OnboardingTrend','DepartmentRoleBreakdown',
            'OnboardingDashboardData']
