# schemas/administrative/behavioral.py
"""
Absenteeism and late arrivals for students and staff.

A record carries either ``studentId`` or ``staffId``; the schema does not
insist on exactly one of them.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    Correlation,
    EMISModel,
    ISODate,
    NonNegativeNumber,
    Percentage,
    TimeOfDay,
    UUIDStr,
)

AttendanceStatus = Literal["present", "absent", "excused", "unexcused", "late", "early_departure"]
RiskLevel = Literal["low", "medium", "high"]
AttendanceTrend = Literal["improving", "declining", "stable"]


class AbsenteeismRecord(EMISModel):
    record_id: UUIDStr
    student_id: Optional[UUIDStr] = None
    staff_id: Optional[UUIDStr] = None
    date: ISODate
    status: AttendanceStatus
    reason: Optional[str] = Field(None, max_length=500)
    is_chronic: bool = False
    risk_level: Optional[RiskLevel] = None


class LateArrivalRecord(EMISModel):
    record_id: UUIDStr
    student_id: Optional[UUIDStr] = None
    staff_id: Optional[UUIDStr] = None
    date: ISODate
    scheduled_time: TimeOfDay
    actual_arrival_time: TimeOfDay
    minutes_late: NonNegativeNumber
    reason: Optional[str] = Field(None, max_length=500)


class StudentBehavioralAnalytics(EMISModel):
    student_id: UUIDStr
    academic_year_id: UUIDStr
    school_id: UUIDStr
    total_days: NonNegativeNumber
    present_days: NonNegativeNumber
    absent_days: NonNegativeNumber
    excused_absences: NonNegativeNumber
    unexcused_absences: NonNegativeNumber
    late_arrivals: NonNegativeNumber
    attendance_rate: Percentage
    punctuality_rate: Percentage
    attendance_trend: AttendanceTrend
    chronic_absenteeism: bool
    risk_level: RiskLevel
    frequent_absence_days: list[str]  # days of the week
    frequent_absence_reasons: list[str]
    intervention_needed: bool


class StudentAttendanceImpact(EMISModel):
    average_student_attendance: Percentage
    correlation: Correlation


class StaffBehavioralAnalytics(EMISModel):
    staff_id: UUIDStr
    academic_year_id: UUIDStr
    school_id: UUIDStr
    total_days: NonNegativeNumber
    present_days: NonNegativeNumber
    absent_days: NonNegativeNumber
    excused_absences: NonNegativeNumber
    unexcused_absences: NonNegativeNumber
    late_arrivals: NonNegativeNumber
    attendance_rate: Percentage
    punctuality_rate: Percentage
    attendance_trend: AttendanceTrend
    impact_on_students: Optional[StudentAttendanceImpact] = None
    risk_level: RiskLevel
    intervention_needed: bool


class AttendanceTrendPoint(EMISModel):
    date: ISODate
    student_attendance_rate: Percentage
    staff_attendance_rate: Percentage


class BehavioralSummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    student_attendance_rate: Percentage
    staff_attendance_rate: Percentage
    student_punctuality_rate: Percentage
    staff_punctuality_rate: Percentage
    chronic_absenteeism_rate: Percentage  # share of students chronically absent
    at_risk_students: NonNegativeNumber
    at_risk_staff: NonNegativeNumber
    trends: list[AttendanceTrendPoint]
