# schemas/administrative/indicators.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    EMISModel,
    ISODate,
    NonNegativeNumber,
    Number,
    Percentage,
    UUIDStr,
)

EfficiencyMetricType = Literal[
    "internal_efficiency",
    "external_efficiency",
    "cost_efficiency",
    "technological_efficiency",
]
EfficiencyStatus = Literal["optimal", "acceptable", "concerning", "critical"]
ObjectiveStatus = Literal["not_started", "in_progress", "completed", "cancelled"]
PlanStatus = Literal["draft", "active", "completed", "cancelled"]


class EfficiencyMetric(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    metric_type: EfficiencyMetricType
    value: Number
    unit: Optional[str] = None
    target: Optional[Number] = None
    status: EfficiencyStatus
    period: str = Field(..., min_length=1)


class DevelopmentObjective(EMISModel):
    objective_id: UUIDStr
    description: str = Field(..., min_length=1)
    target: Optional[str] = None
    status: ObjectiveStatus
    completion_date: Optional[ISODate] = None


class SchoolDevelopmentPlan(EMISModel):
    plan_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    plan_name: str = Field(..., min_length=1, max_length=255)
    start_date: ISODate
    end_date: ISODate
    objectives: list[DevelopmentObjective]
    budget: Optional[NonNegativeNumber] = None
    responsible_party: Optional[str] = None
    status: PlanStatus


class TeacherAgeDistribution(EMISModel):
    # wire keys are not camelCase-derivable
    under_30: NonNegativeNumber = Field(..., alias="under30")
    age_30_40: NonNegativeNumber = Field(..., alias="30-40")
    age_40_50: NonNegativeNumber = Field(..., alias="40-50")
    age_50_60: NonNegativeNumber = Field(..., alias="50-60")
    over_60: NonNegativeNumber = Field(..., alias="over60")


class QualificationTrend(EMISModel):
    period: str
    qualification_rate: Percentage
    average_experience: NonNegativeNumber


class TeacherQualificationIndicator(EMISModel):
    school_id: Optional[UUIDStr] = None
    department_id: Optional[UUIDStr] = None
    total_teachers: NonNegativeNumber
    qualified_teachers: NonNegativeNumber  # holding the required qualifications
    qualification_rate: Percentage
    average_years_experience: NonNegativeNumber
    teachers_with_advanced_degrees: NonNegativeNumber
    teachers_with_certifications: NonNegativeNumber
    certification_rate: Percentage
    age_distribution: Optional[TeacherAgeDistribution] = None
    qualification_trends: list[QualificationTrend]


class AdministrativeIndicatorSummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    efficiency_metrics: list[EfficiencyMetric]
    development_plans: list[SchoolDevelopmentPlan]
    teacher_qualifications: TeacherQualificationIndicator
    overall_efficiency_score: Optional[Percentage] = None
    last_updated: ISODate
