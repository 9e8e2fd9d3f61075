# schemas/people/staff_analytics.py
# People dashboard: staffing levels, ratios and how roles relate to student outcomes.
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..administrative.ratio import Ratio, RatioStatus, RatioTrend
from ..base import Email, EMISModel, MonthStr, NonNegativeNumber, Number, Percentage, UUIDStr
from ..human_resources.staff import EmploymentStatus
from ..learning_outcomes.grades import GradeTrend

CorrelationStrength = Literal["strong", "moderate", "weak", "none"]


class RoleOutcomeMetrics(EMISModel):
    average_student_grade: Optional[Percentage] = None  # across students taught by the role
    pass_rate: Optional[Percentage] = None
    improvement_rate: Optional[Number] = None  # may be negative
    student_engagement_score: Optional[Percentage] = None
    intervention_success_rate: Optional[Percentage] = None
    total_students_impacted: Optional[NonNegativeNumber] = None


class ComprehensiveRatioTrend(EMISModel):
    """
    Monthly ratio snapshot carrying both directions of the ratio.

    ``teacherToStudentRatio`` is meant to be ``1 / studentToTeacherRatio``;
    the pairing is checked by ``emis.rules.check_ratio_reciprocity``.
    """
    month: MonthStr
    student_to_teacher_ratio: Ratio
    teacher_to_student_ratio: Ratio
    student_count: NonNegativeNumber
    teacher_count: NonNegativeNumber
    average_student_grade: Optional[Percentage] = None
    pass_rate: Optional[Percentage] = None
    status: Optional[RatioStatus] = None
    trend: Optional[GradeTrend] = None


class PeopleStats(EMISModel):
    total_staff: NonNegativeNumber
    active_teachers: NonNegativeNumber
    student_to_teacher_ratio: Ratio
    average_effectiveness: Percentage
    recent_hires: NonNegativeNumber
    retention_rate: Percentage
    professional_development_completion: Percentage


class StaffProfileSummary(EMISModel):
    staff_id: UUIDStr
    employee_number: str
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    email: Email
    phone: str
    department: str
    primary_role: str
    roles: list[str]
    status: EmploymentStatus
    hire_date: str
    classes_assigned: NonNegativeNumber
    student_count: NonNegativeNumber
    effectiveness_score: Percentage
    years_of_service: NonNegativeNumber
    attendance_rate: Percentage


class DepartmentShare(EMISModel):
    department: str
    count: NonNegativeNumber
    percentage: Percentage


class RoleShare(EMISModel):
    role: str
    count: NonNegativeNumber
    percentage: Percentage


class RoleShareWithOutcomes(RoleShare):
    outcome_metrics: Optional[RoleOutcomeMetrics] = None


class EffectivenessBand(EMISModel):
    range: str
    count: NonNegativeNumber
    percentage: Percentage


class RoleEffectivenessCorrelation(EMISModel):
    role: str
    average_effectiveness: Percentage
    average_student_outcome: Percentage
    correlation_strength: CorrelationStrength


class PeopleDashboardData(EMISModel):
    stats: PeopleStats
    staff: list[StaffProfileSummary]
    department_distribution: list[DepartmentShare]
    role_distribution: list[RoleShare]
    role_distribution_with_outcomes: Optional[list[RoleShareWithOutcomes]] = None
    ratio_trends: list[RatioTrend]
    comprehensive_ratio_trends: Optional[list[ComprehensiveRatioTrend]] = None
    effectiveness_distribution: list[EffectivenessBand]
    role_effectiveness_correlation: Optional[list[RoleEffectivenessCorrelation]] = None
