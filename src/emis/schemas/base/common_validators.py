"""
Reusable primitive validators.

Each primitive is an ``Annotated`` type whose check function is a pure
function of its input. Failures raise ``PydanticCustomError`` with one of the
violation kinds understood by ``emis.validation`` (``invalid_format``,
``out_of_range``, ``too_short``, ``too_long``, ``invalid_type``) so composite
schemas report a field path plus a precise rule.

Dates and date-times stay strings: the wire format is ``YYYY-MM-DD`` /
ISO-8601, never epoch numbers.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Annotated, Any, Literal, Optional, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, PlainValidator, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError


# ---------------------------------------------------------------------------
# Patterns and constants
# ---------------------------------------------------------------------------

UUID_REGEX = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
E164_PHONE_REGEX = re.compile(r"\+[1-9]\d{1,14}", re.ASCII)
ISO_DATE_REGEX = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
ISO_DATETIME_REGEX = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})(?:\.\d+)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
IANA_TIMEZONE_REGEX = re.compile(r"[A-Za-z_]+/[A-Za-z_]+")
COUNTRY_CODE_REGEX = re.compile(r"[A-Z]{2}")
IDENTIFIER_NUMBER_REGEX = re.compile(r"[A-Z0-9-]+")
MONTH_REGEX = re.compile(r"\d{4}-\d{2}", re.ASCII)
TIME_OF_DAY_REGEX = re.compile(r"\d{2}:\d{2}", re.ASCII)
FISCAL_YEAR_REGEX = re.compile(r"\d{4}", re.ASCII)

EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
URL_MAX_LENGTH = 2048
TIMEZONE_MAX_LENGTH = 100
CURRENCY_MAX = 999_999_999.99

GRADE_ORDER: tuple[str, ...] = (
    "K", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12",
)

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _fail(kind: str, message: str, **ctx: Any) -> PydanticCustomError:
    return PydanticCustomError(kind, message, ctx or None)


# ---------------------------------------------------------------------------
# String checks
# ---------------------------------------------------------------------------

def check_uuid(value: str) -> str:
    if not UUID_REGEX.fullmatch(value):
        raise _fail("invalid_format", "Must be a valid UUID")
    return value


def check_email(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise _fail("too_long", "Email must be no more than 255 characters")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise _fail("invalid_format", "Must be a valid email address ({reason})", reason=str(exc))
    return value


def check_phone(value: str) -> str:
    if len(value) > PHONE_MAX_LENGTH:
        raise _fail("too_long", "Phone number must be no more than 20 characters")
    if not E164_PHONE_REGEX.fullmatch(value):
        raise _fail("invalid_format", "Phone number must be in E.164 format (e.g., +15550123)")
    return value


def check_iso_date(value: str) -> str:
    if not ISO_DATE_REGEX.fullmatch(value):
        raise _fail("invalid_format", "Date must be in YYYY-MM-DD format")
    try:
        date.fromisoformat(value)
    except ValueError:
        # matches the pattern but is not a calendar date, e.g. 2023-02-29
        raise _fail("invalid_format", "Date must be a valid date")
    return value


def check_iso_datetime(value: str) -> str:
    m = ISO_DATETIME_REGEX.fullmatch(value)
    if not m:
        raise _fail("invalid_format", "Must be a valid ISO 8601 datetime string")
    try:
        datetime.strptime(f"{m.group('date')}T{m.group('time')}", "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        raise _fail("invalid_format", "Must be a valid ISO 8601 datetime string")
    offset = m.group("offset")
    if offset != "Z":
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise _fail("invalid_format", "Must be a valid ISO 8601 datetime string")
    return value


def check_url(value: str) -> str:
    if value == "":
        return value
    if len(value) > URL_MAX_LENGTH:
        raise _fail("too_long", "URL must be no more than 2048 characters")
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise _fail("invalid_format", "Must be a valid URL")
    return value


def check_timezone(value: str) -> str:
    if len(value) > TIMEZONE_MAX_LENGTH:
        raise _fail("too_long", "Timezone must be no more than 100 characters")
    if not IANA_TIMEZONE_REGEX.fullmatch(value):
        raise _fail("invalid_format", "Must be a valid IANA timezone (e.g., America/New_York)")
    return value


def check_country_code(value: str) -> str:
    if len(value) != 2:
        raise _fail("invalid_format", "Country code must be 2 letters")
    if not COUNTRY_CODE_REGEX.fullmatch(value):
        raise _fail("invalid_format", "Country code must be uppercase letters (e.g., US, CA, GB)")
    return value


def check_identifier_number(value: str) -> str:
    if len(value) < 3:
        raise _fail("too_short", "Identifier must be at least 3 characters")
    if len(value) > 50:
        raise _fail("too_long", "Identifier must be no more than 50 characters")
    if not IDENTIFIER_NUMBER_REGEX.fullmatch(value):
        raise _fail(
            "invalid_format",
            "Identifier must contain only uppercase letters, numbers, and hyphens",
        )
    return value


def _pattern_check(regex: re.Pattern[str], message: str):
    def check(value: str) -> str:
        if not regex.fullmatch(value):
            raise _fail("invalid_format", message)
        return value

    return check


# ---------------------------------------------------------------------------
# Numeric checks
# ---------------------------------------------------------------------------

def _coerce_number(value: Any) -> Union[int, float]:
    # JSON numbers only: no numeric strings, no booleans
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _fail("invalid_type", "Expected number, received {received}", received=type(value).__name__)
    if isinstance(value, float) and not math.isfinite(value):
        raise _fail("invalid_type", "Expected a finite number")
    return value


def _coerce_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise _fail("invalid_type", "Expected integer, received bool")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise _fail("invalid_type", "Expected integer, received {received}", received=type(value).__name__)
    return value


def _bounds(
    ge: Optional[float] = None,
    le: Optional[float] = None,
    gt: Optional[float] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
) -> AfterValidator:
    def check(value: Union[int, float]) -> Union[int, float]:
        if gt is not None and not value > gt:
            raise _fail("out_of_range", min_message or "Must be greater than {gt}", gt=gt)
        if ge is not None and value < ge:
            raise _fail("out_of_range", min_message or "Must be at least {ge}", ge=ge)
        if le is not None and value > le:
            raise _fail("out_of_range", max_message or "Must be at most {le}", le=le)
        return value

    return AfterValidator(check)


def number(
    *,
    ge: Optional[float] = None,
    le: Optional[float] = None,
    gt: Optional[float] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
) -> Any:
    """Build a bounded JSON-number type. ints stay ints, floats stay floats."""
    return Annotated[
        Union[int, float],
        PlainValidator(_coerce_number),
        _bounds(ge=ge, le=le, gt=gt, min_message=min_message, max_message=max_message),
    ]


def integer(*, ge: Optional[int] = None, le: Optional[int] = None,
            min_message: Optional[str] = None, max_message: Optional[str] = None) -> Any:
    return Annotated[
        int,
        PlainValidator(_coerce_integer),
        _bounds(ge=ge, le=le, min_message=min_message, max_message=max_message),
    ]


# ---------------------------------------------------------------------------
# Public primitive types
# ---------------------------------------------------------------------------

UUIDStr = Annotated[str, AfterValidator(check_uuid)]
Email = Annotated[str, AfterValidator(check_email)]
Phone = Annotated[str, AfterValidator(check_phone)]
ISODate = Annotated[str, AfterValidator(check_iso_date)]
ISODateTime = Annotated[str, AfterValidator(check_iso_datetime)]
Url = Annotated[str, AfterValidator(check_url)]
Timezone = Annotated[str, AfterValidator(check_timezone)]
CountryCode = Annotated[str, AfterValidator(check_country_code)]
IdentifierNumber = Annotated[str, AfterValidator(check_identifier_number)]
MonthStr = Annotated[str, AfterValidator(_pattern_check(MONTH_REGEX, "Month must be in YYYY-MM format"))]
TimeOfDay = Annotated[str, AfterValidator(_pattern_check(TIME_OF_DAY_REGEX, "Time must be in HH:MM format"))]
FiscalYear = Annotated[str, AfterValidator(_pattern_check(FISCAL_YEAR_REGEX, "Fiscal year must be 4 digits"))]

Number = Annotated[Union[int, float], PlainValidator(_coerce_number)]
Integer = Annotated[int, PlainValidator(_coerce_integer)]

Percentage = number(
    ge=0, le=100,
    min_message="Percentage must be at least 0",
    max_message="Percentage must be at most 100",
)
PositiveNumber = number(gt=0, min_message="Must be a positive number")
NonNegativeNumber = number(ge=0, min_message="Must be a non-negative number")
NonNegativeInt = integer(ge=0, min_message="Must be a non-negative integer")
Currency = number(
    ge=0, le=CURRENCY_MAX,
    min_message="Amount must be non-negative",
    max_message="Amount exceeds maximum value",
)
# signed differences (variances, net balances) share the currency magnitude cap
SignedCurrency = number(
    ge=-CURRENCY_MAX, le=CURRENCY_MAX,
    min_message="Amount exceeds minimum value",
    max_message="Amount exceeds maximum value",
)
Year = integer(
    ge=1900, le=2100,
    min_message="Year must be at least 1900",
    max_message="Year must be at most 2100",
)
Score = number(ge=0, le=100)  # 0-100 score that is not labelled a percentage
GPA = number(ge=0, le=4.0)
Latitude = number(ge=-90, le=90, min_message="Latitude must be between -90 and 90",
                  max_message="Latitude must be between -90 and 90")
Longitude = number(ge=-180, le=180, min_message="Longitude must be between -180 and 180",
                   max_message="Longitude must be between -180 and 180")
YearsOfService = number(ge=0, le=50)
Correlation = number(ge=-1, le=1)

GradeLevel = Literal["K", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12"]


def grade_ordinal(grade: str) -> int:
    """Position of a grade token in the K-12 ordering (K=0 ... 12=12)."""
    try:
        return GRADE_ORDER.index(grade)
    except ValueError:
        raise ValueError(f"Unknown grade level: {grade!r}") from None


__all__ = [
    "UUID_REGEX", "E164_PHONE_REGEX", "ISO_DATE_REGEX", "IANA_TIMEZONE_REGEX",
    "CURRENCY_MAX", "GRADE_ORDER",
    "check_uuid", "check_email", "check_phone", "check_iso_date", "check_iso_datetime",
    "check_url", "check_timezone", "check_country_code", "check_identifier_number",
    "number", "integer", "grade_ordinal",
    "UUIDStr", "Email", "Phone", "ISODate", "ISODateTime", "Url", "Timezone",
    "CountryCode", "IdentifierNumber", "MonthStr", "TimeOfDay", "FiscalYear",
    "Number", "Integer", "Percentage", "PositiveNumber", "NonNegativeNumber",
    "NonNegativeInt", "Currency", "SignedCurrency", "Year", "Score", "GPA",
    "Latitude", "Longitude", "YearsOfService", "Correlation", "GradeLevel",
]
