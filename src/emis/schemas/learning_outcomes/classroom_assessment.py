# schemas/learning_outcomes/classroom_assessment.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, Score, UUIDStr

ClassroomAssessmentType = Literal[
    "formative",
    "summative",
    "diagnostic",
    "benchmark",
    "portfolio",
    "project",
    "other",
]


class ClassroomAssessment(EMISModel):
    assessment_id: UUIDStr
    classroom_id: UUIDStr
    subject_id: UUIDStr
    academic_year_id: UUIDStr
    assessment_name: str = Field(..., min_length=1, max_length=255)
    assessment_type: ClassroomAssessmentType
    assessment_date: ISODate
    max_score: NonNegativeNumber
    average_score: NonNegativeNumber
    student_count: NonNegativeNumber
    passing_score: Optional[NonNegativeNumber] = None
    pass_rate: Optional[Percentage] = None
    created_by: UUIDStr
    rubric: Optional[str] = Field(None, max_length=2000)


class ClassroomAssessmentStudentResult(EMISModel):
    result_id: UUIDStr
    assessment_id: UUIDStr
    student_id: UUIDStr
    score: NonNegativeNumber
    max_score: NonNegativeNumber
    percentage: Percentage
    passed: Optional[bool] = None
    feedback: Optional[str] = Field(None, max_length=1000)
    submitted_date: Optional[ISODate] = None


class AssessmentTypeResult(EMISModel):
    count: NonNegativeNumber
    average_score: Score
    pass_rate: Percentage


class AssessmentTrend(EMISModel):
    period: str
    average_score: Score
    pass_rate: Percentage


class ClassroomAssessmentAnalytics(EMISModel):
    classroom_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_assessments: NonNegativeNumber
    average_score: Score
    average_pass_rate: Percentage
    type_breakdown: dict[str, AssessmentTypeResult]
    trends: list[AssessmentTrend]
