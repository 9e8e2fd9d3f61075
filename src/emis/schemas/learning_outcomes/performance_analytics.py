# schemas/learning_outcomes/performance_analytics.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Number, Score, UUIDStr
from .classroom_assessment import ClassroomAssessmentAnalytics
from .grades import GradeAnalytics, GradeTrend
from .national_assessment import NationalAssessmentAnalytics


class StudentPerformanceTrend(EMISModel):
    student_id: UUIDStr
    period: str = Field(..., min_length=1)
    average_grade: Score
    grade_trend: GradeTrend
    assessment_scores: dict[str, NonNegativeNumber]
    improvement_rate: Optional[Number] = None  # percent, may be negative


class OverallPerformance(EMISModel):
    average_grade: Score
    improvement_rate: Optional[Number] = None
    student_count: NonNegativeNumber


class SubjectPerformance(EMISModel):
    average_grade: Score
    student_count: NonNegativeNumber
    improvement_rate: Optional[Number] = None


class PerformanceAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    grade_analytics: GradeAnalytics
    national_assessment_analytics: Optional[list[NationalAssessmentAnalytics]] = None
    classroom_assessment_analytics: Optional[list[ClassroomAssessmentAnalytics]] = None
    overall_performance: OverallPerformance
    student_trends: Optional[list[StudentPerformanceTrend]] = None
    subject_performance: dict[str, SubjectPerformance]
    last_updated: ISODate
