# schemas/school/school.py
from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..base import (
    Address,
    ContactInfo,
    EMISModel,
    GradeLevel,
    ISODate,
    NonNegativeInt,
    UUIDStr,
    grade_ordinal,
    integer,
)

SchoolType = Literal["elementary", "middle", "high", "k12", "alternative", "special"]
SchoolStatus = Literal["active", "inactive", "suspended", "closed", "planned"]

StudentCapacity = integer(ge=1, le=50000)

GRADE_RANGE_MESSAGE = "Highest grade must be greater than or equal to lowest grade"


class GradeRange(EMISModel):
    """
    Lowest and highest grade a school serves.

    Grades are compared by their K-12 ordinal position, never as strings
    ("10" sorts before "2" lexically).
    """
    lowest_grade: GradeLevel
    highest_grade: GradeLevel

    @field_validator("highest_grade")
    @classmethod
    def _highest_not_below_lowest(cls, v: str, info: ValidationInfo) -> str:
        lowest = info.data.get("lowest_grade")
        if lowest is None:
            # lowest grade already failed; nothing to compare against
            return v
        if grade_ordinal(v) < grade_ordinal(lowest):
            raise PydanticCustomError("cross_field", GRADE_RANGE_MESSAGE)
        return v


class AccreditationInfo(EMISModel):
    accredited_by: list[Annotated[str, Field(max_length=255)]]
    accreditation_expiry: Optional[ISODate] = None


class SchoolProfileSummary(EMISModel):
    school_id: UUIDStr
    school_name: str = Field(..., min_length=3, max_length=255)
    school_code: str = Field(..., min_length=3, max_length=50)
    school_type: SchoolType
    status: SchoolStatus
    max_student_capacity: StudentCapacity
    current_enrollment: Optional[NonNegativeInt] = None
    grade_range: GradeRange
    address: Address
    contact_info: ContactInfo
