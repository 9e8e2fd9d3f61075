# schemas/learning_outcomes/grades.py
from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, PlainValidator
from pydantic_core import PydanticCustomError

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, Score, UUIDStr

GradeType = Literal[
    "assignment",
    "quiz",
    "exam",
    "project",
    "participation",
    "final",
    "midterm",
    "other",
]
GradeTrend = Literal["improving", "declining", "stable"]

LETTER_GRADE_MAX_LENGTH = 10


def _check_grade_value(value: Any) -> Union[int, float, str]:
    """A grade is either a 0-100 percentage or a short letter grade such as ``B+``."""
    if isinstance(value, str):
        if len(value) > LETTER_GRADE_MAX_LENGTH:
            raise PydanticCustomError("too_long", "Letter grade must be no more than 10 characters")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("invalid_type", "Grade must be a number or a letter grade")
    if not 0 <= value <= 100:
        raise PydanticCustomError("out_of_range", "Numeric grade must be between 0 and 100")
    return value


GradeValue = Annotated[Union[int, float, str], PlainValidator(_check_grade_value)]


class Grade(EMISModel):
    grade_id: UUIDStr
    student_id: UUIDStr
    assignment_id: Optional[UUIDStr] = None
    subject_id: UUIDStr
    classroom_id: UUIDStr
    academic_year_id: UUIDStr
    term_id: Optional[UUIDStr] = None
    grade_value: GradeValue
    grade_type: GradeType
    max_points: Optional[NonNegativeNumber] = None
    earned_points: Optional[NonNegativeNumber] = None
    weight: Optional[Percentage] = None
    recorded_date: ISODate
    recorded_by: UUIDStr
    notes: Optional[str] = Field(None, max_length=1000)


class GradeBucket(EMISModel):
    count: NonNegativeNumber
    average: Score


class GradeSummary(EMISModel):
    student_id: UUIDStr
    subject_id: UUIDStr
    classroom_id: UUIDStr
    academic_year_id: UUIDStr
    term_id: Optional[UUIDStr] = None
    final_grade: GradeValue
    average_grade: Score
    grade_count: NonNegativeNumber
    grade_distribution: dict[str, GradeBucket]
    trend: Optional[GradeTrend] = None


class GradeBand(EMISModel):
    range: str  # "90-100"
    count: NonNegativeNumber
    percentage: Percentage


class SubjectGrade(EMISModel):
    average_grade: Score
    student_count: NonNegativeNumber


class GradePeriodTrend(EMISModel):
    period: str
    average_grade: Score


class GradeAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    average_grade: Score
    grade_distribution: list[GradeBand]
    subject_breakdown: dict[str, SubjectGrade]
    trends: list[GradePeriodTrend]
