# schemas/students/enrollment.py
# Enrollment dashboard payloads.
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, NonNegativeInt, NonNegativeNumber, Number, Percentage

EnrollmentActivityType = Literal["enrollment", "review", "completed"]
EnrollmentAlertType = Literal["warning", "info"]


class EnrollmentStats(EMISModel):
    total_enrolled: NonNegativeNumber
    monthly_increase: Number  # may be negative
    completion_rate: Percentage
    pending_reviews: NonNegativeNumber


class RecentActivity(EMISModel):
    id: NonNegativeInt
    type: EnrollmentActivityType
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    time: str


class EnrollmentAlert(EMISModel):
    id: NonNegativeInt
    type: EnrollmentAlertType
    message: str = Field(..., min_length=1, max_length=500)


class EnrollmentTrendData(EMISModel):
    date: str
    enrollments: NonNegativeNumber
    completed: NonNegativeNumber
    pending: NonNegativeNumber


class GradeDistributionData(EMISModel):
    grade: str
    count: NonNegativeNumber
    percentage: Percentage


class CompletionFunnelData(EMISModel):
    step: str
    count: NonNegativeNumber
    percentage: Percentage


class StatusBreakdownData(EMISModel):
    status: str
    count: NonNegativeNumber
    percentage: Percentage
    color: str


class EnrollmentSource(EMISModel):
    source: str
    count: NonNegativeNumber
    percentage: Percentage


class EnrollmentDashboardAnalytics(EMISModel):
    trends: list[EnrollmentTrendData]
    grade_distribution: list[GradeDistributionData]
    completion_funnel: list[CompletionFunnelData]
    status_breakdown: list[StatusBreakdownData]
    average_completion_time: NonNegativeNumber  # hours
    peak_enrollment_period: str
    enrollment_sources: list[EnrollmentSource]


class EnrollmentDashboardData(EMISModel):
    stats: EnrollmentStats
    recent_activities: list[RecentActivity]
    alerts: Optional[list[EnrollmentAlert]] = None
    analytics: EnrollmentDashboardAnalytics
