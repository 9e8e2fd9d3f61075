# schemas/administrative/special_needs.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr, number

SpecialNeedsCategory = Literal[
    "learning_disability",
    "intellectual_disability",
    "autism_spectrum",
    "emotional_disturbance",
    "speech_language_impairment",
    "hearing_impairment",
    "visual_impairment",
    "orthopedic_impairment",
    "other_health_impairment",
    "multiple_disabilities",
    "gifted_talented",
    "other",
]
Severity = Literal["mild", "moderate", "severe", "profound"]
SupportService = Literal[
    "speech_therapy",
    "occupational_therapy",
    "physical_therapy",
    "counseling",
    "assistive_technology",
    "paraprofessional_support",
    "modified_curriculum",
    "extended_time",
    "other",
]

WeeklyHours = number(ge=0, le=40)


class SpecialNeedsClassification(EMISModel):
    category: SpecialNeedsCategory
    severity: Optional[Severity] = None
    # Individualized Education Program / Section 504 plan
    requires_iep: bool = Field(False, alias="requiresIEP")
    requires_504: bool = Field(False, alias="requires504")
    support_services: list[SupportService]


class SupportStaffAssignment(EMISModel):
    staff_id: UUIDStr
    role: str
    hours_per_week: Optional[WeeklyHours] = None


class ProgressNote(EMISModel):
    date: ISODate
    note: str = Field(..., max_length=2000)
    recorded_by: UUIDStr


class SpecialNeedsStudentRecord(EMISModel):
    student_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    classifications: list[SpecialNeedsClassification]
    assessment_date: Optional[ISODate] = None
    next_review_date: Optional[ISODate] = None
    accommodations: list[str]
    modifications: list[str]
    support_staff: list[SupportStaffAssignment]
    progress_notes: Optional[list[ProgressNote]] = None


class CountShare(EMISModel):
    count: NonNegativeNumber
    percentage: Percentage


class SpecialNeedsTrend(EMISModel):
    period: str
    total_special_needs_students: NonNegativeNumber
    special_needs_percentage: Percentage


class SpecialNeedsPopulationSummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_special_needs_students: NonNegativeNumber
    total_students: NonNegativeNumber
    special_needs_percentage: Percentage
    category_breakdown: dict[str, CountShare]
    support_services_breakdown: dict[str, CountShare]
    iep_students: NonNegativeNumber
    section_504_students: NonNegativeNumber = Field(..., alias="section504Students")
    trends: list[SpecialNeedsTrend]
