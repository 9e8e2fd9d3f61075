# schemas/forms/school_form.py
"""
Create-school form.

Mirrors the create-school request body accepted by the school service. It is
looser than ``SchoolProfileSummary`` where a form needs to be (phones may be
typed with spaces or hyphens, optional text boxes may be left empty) and
stricter where the service is (timezone must be ``Continent/City``).
"""
from __future__ import annotations

import re
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, Field
from pydantic_core import PydanticCustomError

from ..base import CountryCode, Email, EMISModel, Latitude, Longitude, UUIDStr
from ..base.common_validators import E164_PHONE_REGEX, check_iso_date, check_url, check_uuid
from ..school.school import GradeRange, SchoolType, StudentCapacity

FORM_TIMEZONE_REGEX = re.compile(r"[A-Z][a-z]+/[A-Z][a-z_]+")
_PHONE_SEPARATORS = re.compile(r"[\s\-]")

SCHOOL_TYPE_LABELS: dict[str, str] = {
    "elementary": "Elementary",
    "middle": "Middle School",
    "high": "High School",
    "k12": "K-12",
    "alternative": "Alternative",
    "special": "Special Education",
}

TIMEZONE_CHOICES: dict[str, str] = {
    "America/New_York": "Eastern Time (ET)",
    "America/Chicago": "Central Time (CT)",
    "America/Denver": "Mountain Time (MT)",
    "America/Los_Angeles": "Pacific Time (PT)",
    "America/Phoenix": "Arizona Time (MST)",
    "America/Anchorage": "Alaska Time (AKT)",
    "Pacific/Honolulu": "Hawaii Time (HST)",
    "America/Toronto": "Eastern Time - Canada (ET)",
    "America/Vancouver": "Pacific Time - Canada (PT)",
    "Europe/London": "GMT/BST - United Kingdom",
    "Europe/Paris": "CET/CEST - Central Europe",
    "Asia/Tokyo": "JST - Japan",
    "Asia/Dubai": "GST - United Arab Emirates",
    "Asia/Singapore": "SGT - Singapore",
    "Australia/Sydney": "AEST/AEDT - Australia (Sydney)",
}


def _blank(value: str) -> bool:
    return value.strip() == ""


def check_form_phone(value: str) -> str:
    if _blank(value):
        raise PydanticCustomError("too_short", "Primary phone is required")
    if not E164_PHONE_REGEX.fullmatch(_PHONE_SEPARATORS.sub("", value)):
        raise PydanticCustomError("invalid_format", "Phone must be in E.164 format (e.g., +1-555-0123)")
    return value


def check_optional_form_phone(value: str) -> str:
    if _blank(value):
        return value
    return check_form_phone(value)


def check_form_timezone(value: str) -> str:
    if _blank(value):
        raise PydanticCustomError("too_short", "Timezone is required")
    if not FORM_TIMEZONE_REGEX.fullmatch(value):
        raise PydanticCustomError(
            "invalid_format", "Please enter a valid IANA timezone (e.g., America/New_York)"
        )
    return value


def _allow_blank(check):
    def run(value: str) -> str:
        if _blank(value):
            return value
        return check(value)

    return run


FormPhone = Annotated[str, AfterValidator(check_form_phone)]
OptionalFormPhone = Annotated[str, AfterValidator(check_optional_form_phone)]
FormTimezone = Annotated[str, AfterValidator(check_form_timezone)]
BlankOrUrl = Annotated[str, AfterValidator(_allow_blank(check_url))]
BlankOrDate = Annotated[str, AfterValidator(_allow_blank(check_iso_date))]
BlankOrUUID = Annotated[str, AfterValidator(_allow_blank(check_uuid))]


class SchoolFormContactInfo(EMISModel):
    primary_email: Email
    primary_phone: FormPhone
    secondary_phone: Optional[OptionalFormPhone] = None
    website: Optional[BlankOrUrl] = None
    fax: Optional[str] = None


class SchoolFormAddress(EMISModel):
    street: str = Field(..., min_length=1, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    country: CountryCode
    postal_code: str = Field(..., min_length=1, max_length=20)
    timezone: FormTimezone
    latitude: Optional[Latitude] = None
    longitude: Optional[Longitude] = None


class CreateSchoolForm(EMISModel):
    school_name: str = Field(..., min_length=3, max_length=255)
    school_code: str = Field(..., min_length=3, max_length=50)
    school_type: SchoolType
    contact_info: SchoolFormContactInfo
    address: SchoolFormAddress
    grade_range: GradeRange
    max_student_capacity: StudentCapacity
    # empty strings mean "left blank"
    description: Optional[str] = Field(None, max_length=1000)
    motto: Optional[str] = Field(None, max_length=255)
    logo_url: Optional[BlankOrUrl] = None
    founded_date: Optional[BlankOrDate] = None
    principal_user_id: Optional[BlankOrUUID] = None
    vice_principal_user_ids: Optional[list[UUIDStr]] = None


def default_school_form() -> dict[str, Any]:
    """
    Initial values for an empty create-school form, in wire names.

    The defaults are not themselves a valid submission: required text fields
    start empty.
    """
    return {
        "schoolName": "",
        "schoolCode": "",
        "schoolType": "elementary",
        "contactInfo": {
            "primaryEmail": "",
            "primaryPhone": "",
            "secondaryPhone": "",
            "website": "",
            "fax": "",
        },
        "address": {
            "street": "",
            "city": "",
            "state": "",
            "country": "US",
            "postalCode": "",
            "timezone": "America/New_York",
        },
        "gradeRange": {"lowestGrade": "K", "highestGrade": "5"},
        "maxStudentCapacity": 500,
        "description": "",
        "motto": "",
        "logoUrl": "",
        "foundedDate": "",
        "principalUserId": "",
        "vicePrincipalUserIds": [],
    }
