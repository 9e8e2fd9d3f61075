# schemas/learning_outcomes/national_assessment.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr, number

NationalAssessmentType = Literal[
    "standardized_test",
    "national_exam",
    "aptitude_test",
    "achievement_test",
    "other",
]
PerformanceLevel = Literal["exemplary", "proficient", "developing", "beginning", "below_basic"]
SittingStatus = Literal["completed", "pending", "absent", "excused"]

Percentile = number(ge=0, le=100)


class NationalAssessment(EMISModel):
    """One student's result on an external assessment, with comparison averages."""
    assessment_id: UUIDStr
    student_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    assessment_name: str = Field(..., min_length=1, max_length=255)
    assessment_type: NationalAssessmentType
    subject: Optional[str] = Field(None, max_length=255)
    test_date: ISODate
    score: NonNegativeNumber
    max_score: Optional[NonNegativeNumber] = None
    percentile: Optional[Percentile] = None
    national_average: Optional[NonNegativeNumber] = None
    state_average: Optional[NonNegativeNumber] = None
    district_average: Optional[NonNegativeNumber] = None
    performance_level: Optional[PerformanceLevel] = None
    status: SittingStatus


class LevelShare(EMISModel):
    count: NonNegativeNumber
    percentage: Percentage


class SubjectScore(EMISModel):
    average_score: NonNegativeNumber
    student_count: NonNegativeNumber


class NationalAssessmentTrend(EMISModel):
    period: str
    average_score: NonNegativeNumber
    participation_rate: Percentage


class NationalAssessmentAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    assessment_name: str
    total_students: NonNegativeNumber
    average_score: NonNegativeNumber
    national_average: Optional[NonNegativeNumber] = None
    state_average: Optional[NonNegativeNumber] = None
    district_average: Optional[NonNegativeNumber] = None
    performance_level_distribution: dict[str, LevelShare]
    subject_breakdown: dict[str, SubjectScore]
    trends: list[NationalAssessmentTrend]
