# schemas/administrative/enrollment.py
# Enrollment, access and drop-out rates.
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr


class EnrollmentRate(EMISModel):
    period: str = Field(..., min_length=1)  # "2024-Q1", "2024-09"
    enrollment_rate: Percentage
    access_rate: Percentage  # share of the eligible population enrolled
    drop_out_rate: Percentage
    new_enrollments: NonNegativeNumber
    total_enrollments: NonNegativeNumber
    dropouts: NonNegativeNumber
    eligible_population: Optional[NonNegativeNumber] = None


class EnrollmentTrend(EMISModel):
    date: ISODate
    enrollment_rate: Percentage
    access_rate: Percentage
    drop_out_rate: Percentage
    total_students: NonNegativeNumber
    new_enrollments: NonNegativeNumber
    dropouts: NonNegativeNumber


class GradeLevelEnrollment(EMISModel):
    enrollment_rate: Percentage
    total_students: NonNegativeNumber


class EnrollmentAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    current_enrollment_rate: Percentage
    average_enrollment_rate: Percentage
    access_rate: Percentage
    drop_out_rate: Percentage
    retention_rate: Percentage
    trends: list[EnrollmentTrend]
    grade_level_breakdown: dict[str, GradeLevelEnrollment]
