# schemas/administrative/rate.py
# Completion, progression and survival rates.
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr


class CompletionRate(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    grade_level: Optional[str] = None
    program: Optional[str] = None
    completion_rate: Percentage
    total_eligible: NonNegativeNumber
    total_completed: NonNegativeNumber
    period: str = Field(..., min_length=1)


class ProgressionRate(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    from_grade: str = Field(..., min_length=1)
    to_grade: str = Field(..., min_length=1)
    progression_rate: Percentage
    total_students: NonNegativeNumber
    progressed: NonNegativeNumber
    retained: NonNegativeNumber
    period: str = Field(..., min_length=1)


class SurvivalRate(EMISModel):
    """Share of a starting cohort still enrolled when it reaches the target grade."""
    school_id: Optional[UUIDStr] = None
    cohort: str = Field(..., min_length=1)  # e.g. "2020-2024"
    starting_grade: str = Field(..., min_length=1)
    target_grade: str = Field(..., min_length=1)
    survival_rate: Percentage
    initial_cohort_size: NonNegativeNumber
    current_enrollment: NonNegativeNumber
    dropouts: NonNegativeNumber
    transfers: Optional[NonNegativeNumber] = None


class RateTrend(EMISModel):
    date: ISODate
    completion_rate: Optional[Percentage] = None
    progression_rate: Optional[Percentage] = None
    survival_rate: Optional[Percentage] = None
    period: str = Field(..., min_length=1)


class GradeLevelRates(EMISModel):
    completion_rate: Percentage
    progression_rate: Percentage
    survival_rate: Percentage


class RateAnalytics(EMISModel):
    current_completion_rate: Percentage
    average_completion_rate: Percentage
    current_progression_rate: Percentage
    average_progression_rate: Percentage
    current_survival_rate: Percentage
    average_survival_rate: Percentage
    trends: list[RateTrend]
    grade_level_breakdown: dict[str, GradeLevelRates]
