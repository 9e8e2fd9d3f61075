# schemas/human_resources/onboarding.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, NonNegativeInt, NonNegativeNumber, Number, Percentage

OnboardingActivityType = Literal["completed", "in_progress", "started"]


class OnboardingStats(EMISModel):
    total_onboarded: NonNegativeNumber
    monthly_increase: Number  # may be negative
    completion_rate: Percentage
    average_time: NonNegativeNumber  # days
    in_progress: NonNegativeNumber


class OnboardingActivity(EMISModel):
    id: NonNegativeInt
    type: OnboardingActivityType
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=500)
    time: str


class OnboardingTrend(EMISModel):
    month: str
    onboarded: NonNegativeNumber
    completed: NonNegativeNumber


class DepartmentRoleBreakdownItem(EMISModel):
    role: str
    count: NonNegativeNumber
    percentage: Percentage  # share within the department


class DepartmentRoleBreakdown(EMISModel):
    department: str
    total_count: NonNegativeNumber
    roles: list[DepartmentRoleBreakdownItem]


class OnboardingDepartmentDistribution(EMISModel):
    department: str
    count: NonNegativeNumber
    percentage: Percentage


class OnboardingRoleDistribution(EMISModel):
    role: str
    count: NonNegativeNumber
    percentage: Percentage


class OnboardingStatusBreakdown(EMISModel):
    status: str
    count: NonNegativeNumber
    percentage: Percentage


class OnboardingDashboardData(EMISModel):
    stats: OnboardingStats
    department_role_breakdown: list[DepartmentRoleBreakdown]
    department_distribution: Optional[list[OnboardingDepartmentDistribution]] = None
    role_distribution: Optional[list[OnboardingRoleDistribution]] = None
    status_breakdown: Optional[list[OnboardingStatusBreakdown]] = None
    trends: Optional[list[OnboardingTrend]] = None
    recent_activities: list[OnboardingActivity]
