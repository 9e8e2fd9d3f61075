# schemas/students/student.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    GPA,
    Address,
    Email,
    EMISModel,
    GradeLevel,
    ISODate,
    NonNegativeInt,
    NonNegativeNumber,
    Phone,
    UUIDStr,
    number,
)
from ..human_resources.staff import Gender

ContactType = Literal["primary", "emergency", "guardian"]
BloodType = Literal["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]
PerformanceTrend = Literal["up", "down", "stable"]
StudentStatus = Literal["active", "graduated", "transferred", "suspended"]

Credits = number(ge=0, le=10)


class StudentContact(EMISModel):
    type: ContactType
    name: str = Field(..., min_length=1, max_length=255)
    relationship: str = Field(..., max_length=100)
    phone: Phone
    email: Optional[Email] = None
    address: Optional[Address] = None


class StudentMedical(EMISModel):
    blood_type: Optional[BloodType] = None
    allergies: Optional[list[str]] = None
    medications: Optional[list[str]] = None
    conditions: Optional[list[str]] = None
    emergency_contact: str = Field(..., min_length=1, max_length=255)
    insurance_provider: Optional[str] = Field(None, max_length=255)


class ClassAttendance(EMISModel):
    present: NonNegativeInt
    absent: NonNegativeInt
    tardy: NonNegativeInt
    total: NonNegativeInt


class StudentClass(EMISModel):
    id: UUIDStr
    name: str = Field(..., min_length=1, max_length=255)
    teacher: str = Field(..., max_length=255)
    room: Optional[str] = Field(None, max_length=100)
    schedule: Optional[str] = Field(None, max_length=255)
    credits: Credits
    grade: Optional[str] = Field(None, max_length=10)
    attendance: ClassAttendance


class StudentPerformanceData(EMISModel):
    category: str = Field(..., min_length=1, max_length=255)
    score: NonNegativeNumber
    max_score: NonNegativeNumber
    trend: Optional[PerformanceTrend] = None
    description: Optional[str] = Field(None, max_length=1000)


class StudentProfileSummary(EMISModel):
    """Core student record: identity, placement and enrollment lifecycle."""
    student_id: UUIDStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: ISODate
    gender: Gender
    grade: GradeLevel
    section: Optional[str] = Field(None, max_length=50)
    academic_year: str = Field(..., min_length=1)
    enrollment_date: ISODate
    graduation_date: Optional[ISODate] = None
    status: StudentStatus
    overall_gpa: GPA = Field(..., alias="overallGPA")
    address: Address
    last_updated: ISODate
    created_at: ISODate
    updated_by: UUIDStr
