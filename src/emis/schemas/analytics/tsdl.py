# schemas/analytics/tsdl.py
"""
Teacher-Student Data Link (TSDL).

Connects a teacher to the outcomes of the students they teach: per-student
grade trends, the grade distribution, and the students at either end of it.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Number, Percentage, Score, UUIDStr
from ..learning_outcomes.grades import GradeBand, GradeTrend

RiskLevel = Literal["low", "medium", "high"]


class TSDLStudentPerformanceTrend(EMISModel):
    student_id: UUIDStr
    student_name: str
    period: str = Field(..., min_length=1)
    average_grade: Score
    grade_trend: GradeTrend
    improvement_rate: Optional[Number] = None


class StrugglingStudent(EMISModel):
    student_id: UUIDStr
    student_name: str
    current_grade: Score
    risk_level: RiskLevel


class ExcellingStudent(EMISModel):
    student_id: UUIDStr
    student_name: str
    current_grade: Score


class TSDLAnalytics(EMISModel):
    staff_id: UUIDStr
    academic_year_id: UUIDStr
    school_id: UUIDStr
    total_students: NonNegativeNumber
    average_student_grade: Score
    improvement_rate: Optional[Number] = None
    pass_rate: Percentage
    student_performance_trends: list[TSDLStudentPerformanceTrend]
    grade_distribution: list[GradeBand]
    struggling_students: list[StrugglingStudent]
    excelling_students: list[ExcellingStudent]
    last_updated: ISODate
