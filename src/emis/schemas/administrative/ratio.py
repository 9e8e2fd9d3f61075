# schemas/administrative/ratio.py
from __future__ import annotations

from typing import Literal, Optional

from ..base import (
    EMISModel,
    ISODate,
    MonthStr,
    NonNegativeNumber,
    Percentage,
    UUIDStr,
    number,
)

RatioStatus = Literal["optimal", "acceptable", "concerning", "critical"]
AlertLevel = Literal["warning", "critical"]

Ratio = number(gt=0, min_message="Ratio must be positive")
BoundedRatio = number(
    gt=0, le=100,
    min_message="Ratio must be positive",
    max_message="Ratio exceeds reasonable maximum",
)


class StudentToTeacherRatio(EMISModel):
    school_id: Optional[UUIDStr] = None
    department_id: Optional[UUIDStr] = None
    grade_level: Optional[str] = None
    ratio: BoundedRatio
    student_count: NonNegativeNumber
    teacher_count: NonNegativeNumber
    date: ISODate
    target_ratio: Optional[Ratio] = None
    status: Optional[RatioStatus] = None


class SchoolToStudentRatio(EMISModel):
    school_id: UUIDStr
    total_schools: NonNegativeNumber
    total_students: NonNegativeNumber
    ratio: Ratio
    average_school_size: NonNegativeNumber
    date: ISODate


class RatioTrend(EMISModel):
    month: MonthStr
    ratio: Ratio
    student_count: NonNegativeNumber
    teacher_count: NonNegativeNumber
    school_count: Optional[NonNegativeNumber] = None


class RatioBand(EMISModel):
    range: str  # "15-20:1"
    count: NonNegativeNumber
    percentage: Percentage


class RatioAlert(EMISModel):
    level: AlertLevel
    message: str
    school_id: Optional[UUIDStr] = None
    department_id: Optional[UUIDStr] = None


class RatioAnalytics(EMISModel):
    current_ratio: Ratio
    average_ratio: Ratio
    target_ratio: Optional[Ratio] = None
    trends: list[RatioTrend]
    distribution: list[RatioBand]
    alerts: Optional[list[RatioAlert]] = None
