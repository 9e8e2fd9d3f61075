# schemas/human_resources/experience.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr, YearsOfService


class ExperienceRecord(EMISModel):
    record_id: UUIDStr
    staff_id: UUIDStr
    organization: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., max_length=255)
    start_date: ISODate
    end_date: Optional[ISODate] = None
    is_current: bool = False
    years_of_experience: YearsOfService
    description: Optional[str] = Field(None, max_length=1000)


class TeachingExperience(EMISModel):
    staff_id: UUIDStr
    total_years_teaching: YearsOfService
    years_at_current_school: YearsOfService
    years_in_current_role: YearsOfService
    grade_levels_taught: list[str]
    subjects_taught: list[str]
    experience_by_subject: Optional[dict[str, YearsOfService]] = None
    experience_by_grade: Optional[dict[str, YearsOfService]] = None


class ExperienceBand(EMISModel):
    range: str  # e.g. "0-5 years"
    count: NonNegativeNumber
    percentage: Percentage


class ExperienceCohort(EMISModel):
    count: NonNegativeNumber
    percentage: Percentage
    average_experience: NonNegativeNumber


class RetentionByExperience(EMISModel):
    experience_range: str
    retention_rate: Percentage


class ExperienceSummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    average_years_experience: NonNegativeNumber
    median_years_experience: Optional[NonNegativeNumber] = None
    experience_distribution: list[ExperienceBand]
    new_staff: ExperienceCohort          # under 2 years
    experienced_staff: ExperienceCohort  # 5+ years
    retention_by_experience: Optional[list[RetentionByExperience]] = None
