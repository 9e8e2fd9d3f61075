# schemas/human_resources/professional_development.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    Currency,
    EMISModel,
    ISODate,
    NonNegativeNumber,
    Percentage,
    UUIDStr,
    number,
)

ProfessionalDevelopmentType = Literal[
    "training",
    "workshop",
    "conference",
    "certification",
    "course",
    "seminar",
    "webinar",
    "mentoring",
    "coaching",
    "other",
]
ActivityStatus = Literal["planned", "in_progress", "completed", "cancelled"]
ActivityImpact = Literal["high", "medium", "low", "unknown"]
CertificationStatus = Literal["active", "expired", "pending_renewal", "revoked"]

ActivityHours = number(ge=0, le=1000)


class ProfessionalDevelopmentRecord(EMISModel):
    record_id: UUIDStr
    staff_id: UUIDStr
    title: str = Field(..., min_length=1, max_length=255)
    type: ProfessionalDevelopmentType
    provider: Optional[str] = Field(None, max_length=255)
    start_date: ISODate
    end_date: Optional[ISODate] = None
    hours: ActivityHours
    cost: Optional[Currency] = None
    funding_source: Optional[str] = Field(None, max_length=255)
    status: ActivityStatus
    completion_date: Optional[ISODate] = None
    certificate_issued: bool = False
    certificate_number: Optional[str] = Field(None, max_length=100)
    skills_gained: Optional[list[str]] = None
    impact: Optional[ActivityImpact] = None
    notes: Optional[str] = Field(None, max_length=2000)


class Certification(EMISModel):
    certification_id: UUIDStr
    staff_id: UUIDStr
    certification_name: str = Field(..., min_length=1, max_length=255)
    issuing_organization: str = Field(..., max_length=255)
    issue_date: ISODate
    expiry_date: Optional[ISODate] = None
    certificate_number: Optional[str] = Field(None, max_length=100)
    status: CertificationStatus
    renewal_required: bool = False
    renewal_date: Optional[ISODate] = None


class ProfessionalDevelopmentAllowance(EMISModel):
    allowance_id: UUIDStr
    staff_id: UUIDStr
    academic_year_id: UUIDStr
    total_allocated: Currency
    total_spent: Currency = 0
    remaining: Currency
    activities: Optional[list[UUIDStr]] = None  # ProfessionalDevelopmentRecord ids


class ActivityTypeBreakdown(EMISModel):
    count: NonNegativeNumber
    total_hours: NonNegativeNumber
    total_cost: Currency


class StaffParticipation(EMISModel):
    staff_id: UUIDStr
    total_hours: NonNegativeNumber
    activities_completed: NonNegativeNumber
    certifications_earned: NonNegativeNumber


class ProfessionalDevelopmentTrend(EMISModel):
    period: str
    total_activities: NonNegativeNumber
    total_hours: NonNegativeNumber
    total_cost: Currency
    participation_rate: Percentage


class ProfessionalDevelopmentAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_activities: NonNegativeNumber
    total_hours: NonNegativeNumber
    total_cost: Currency
    average_hours_per_staff: NonNegativeNumber
    completion_rate: Percentage
    type_breakdown: dict[str, ActivityTypeBreakdown]
    staff_participation: list[StaffParticipation]
    trends: list[ProfessionalDevelopmentTrend]
