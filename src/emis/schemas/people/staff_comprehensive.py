# schemas/people/staff_comprehensive.py
from __future__ import annotations

from typing import ClassVar, Literal, Optional

from ..administrative.behavioral import StaffBehavioralAnalytics
from ..base import (
    EMISModel,
    ISODate,
    NonNegativeInt,
    NonNegativeNumber,
    Number,
    ProfileMixin,
    Score,
    UUIDStr,
)
from ..human_resources.conditional_cash_transfer import ConditionalCashTransfer
from ..human_resources.experience import TeachingExperience
from ..human_resources.professional_development import (
    Certification,
    ProfessionalDevelopmentRecord,
)
from ..human_resources.salary import StaffSalaryRecord
from ..human_resources.staff import Staff
from ..human_resources.staff_roles import RoleAssignment

RetentionRisk = Literal["low", "medium", "high"]


class StaffPerformanceMetrics(EMISModel):
    """Teacher-student data link figures for one staff member."""
    teaching_effectiveness: Optional[Score] = None
    average_student_grade: Optional[Score] = None
    improvement_rate: Optional[Number] = None
    pass_rate: Optional[Score] = None
    engagement_score: Optional[Score] = None


class ClassroomAssignment(EMISModel):
    classroom_id: UUIDStr
    subject_id: UUIDStr
    grade_level: str
    student_count: NonNegativeInt


class RetentionData(EMISModel):
    years_of_service: NonNegativeNumber
    retention_risk: Optional[RetentionRisk] = None
    last_promotion_date: Optional[ISODate] = None


class ComprehensiveStaffProfile(ProfileMixin, Staff):
    """A staff record with every HR and analytics extension that applies to it."""

    core_model: ClassVar[type[Staff]] = Staff

    salary: Optional[StaffSalaryRecord] = None
    role_assignments: Optional[list[RoleAssignment]] = None
    professional_development: Optional[list[ProfessionalDevelopmentRecord]] = None
    certifications: Optional[list[Certification]] = None
    teaching_experience: Optional[TeachingExperience] = None
    behavioral_analytics: Optional[StaffBehavioralAnalytics] = None
    conditional_cash_transfers: Optional[list[ConditionalCashTransfer]] = None
    performance_metrics: Optional[StaffPerformanceMetrics] = None
    assignments: Optional[list[ClassroomAssignment]] = None
    retention_data: Optional[RetentionData] = None
