# schemas/human_resources/staff.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    GPA,
    EMISModel,
    IdentifierNumber,
    ISODate,
    RequiredContactInfo,
    UUIDStr,
    Year,
)

Gender = Literal["male", "female", "other", "prefer_not_to_say"]
EmploymentType = Literal["full_time", "part_time", "contract", "substitute"]
EmploymentStatus = Literal["active", "on_leave", "terminated", "retired"]
StaffRoleType = Literal[
    "teacher",
    "principal",
    "vice_principal",
    "counselor",
    "administrator",
    "support_staff",
    "security",
    "janitorial",
    "transportation",
    "nurse",
    "librarian",
    "other",
]


class StaffRole(EMISModel):
    """One role a staff member holds at a school. A person may hold several."""
    role_id: UUIDStr
    role_type: StaffRoleType
    school_id: UUIDStr
    department_id: Optional[UUIDStr] = None
    start_date: ISODate
    end_date: Optional[ISODate] = None
    is_primary: bool = False
    subjects: Optional[list[str]] = None      # teachers only
    grade_levels: Optional[list[str]] = None  # teachers only


class EducationRecord(EMISModel):
    degree: str = Field(..., min_length=1, max_length=255)
    institution: str = Field(..., min_length=1, max_length=255)
    year: Year
    field_of_study: Optional[str] = Field(None, max_length=255)
    gpa: Optional[GPA] = None


class Qualifications(EMISModel):
    education: list[EducationRecord]
    certifications: list[str]
    licenses: list[str]
    specializations: Optional[list[str]] = None


class Employment(EMISModel):
    hire_date: ISODate
    employment_type: EmploymentType
    status: EmploymentStatus
    termination_date: Optional[ISODate] = None
    termination_reason: Optional[str] = Field(None, max_length=500)


class Staff(EMISModel):
    staff_id: UUIDStr
    employee_number: IdentifierNumber
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    middle_name: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[ISODate] = None
    gender: Optional[Gender] = None
    contact_info: RequiredContactInfo
    employment: Employment
    roles: list[StaffRole]
    qualifications: Optional[Qualifications] = None
