# tests/test_primitives.py
from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from emis.schemas.base import (
    CURRENCY_MAX,
    GRADE_ORDER,
    Currency,
    Email,
    FiscalYear,
    IdentifierNumber,
    Integer,
    ISODate,
    ISODateTime,
    Latitude,
    MonthStr,
    Number,
    Percentage,
    Phone,
    SignedCurrency,
    TimeOfDay,
    Timezone,
    Url,
    UUIDStr,
    grade_ordinal,
)


def _error_type(tp, value) -> str:
    with pytest.raises(ValidationError) as exc:
        TypeAdapter(tp).validate_python(value)
    return exc.value.errors()[0]["type"]


# ---- dates ----------------------------------------------------------------

@pytest.mark.parametrize("value", ["2024-02-29", "2023-12-31", "2000-01-01"])
def test_iso_date_accepts_calendar_dates(value):
    assert TypeAdapter(ISODate).validate_python(value) == value


@pytest.mark.parametrize("value", ["2023-02-29", "2024-13-01", "2023-13-01", "2023-04-31", "2023-1-01", "01/02/2023", ""])
def test_iso_date_rejects_bad_dates(value):
    assert _error_type(ISODate, value) == "invalid_format"


@pytest.mark.parametrize(
    "value",
    ["2024-03-01T08:30:00Z", "2024-03-01T08:30:00.123Z", "2024-03-01T08:30:00+05:30", "2024-03-01T08:30:00-07:00"],
)
def test_iso_datetime_accepts_offsets(value):
    assert TypeAdapter(ISODateTime).validate_python(value) == value


@pytest.mark.parametrize(
    "value", ["2024-03-01T08:30:00", "2024-03-01 08:30:00Z", "2024-02-30T08:30:00Z", "2024-03-01T25:00:00Z"]
)
def test_iso_datetime_rejects_missing_offset_or_bad_values(value):
    assert _error_type(ISODateTime, value) == "invalid_format"


# ---- numbers --------------------------------------------------------------

@pytest.mark.parametrize("value", [0, 0.0, 50, 99.99, 100])
def test_percentage_bounds_inclusive(value):
    assert TypeAdapter(Percentage).validate_python(value) == value


@pytest.mark.parametrize("value", [-0.01, 100.01, 250])
def test_percentage_out_of_range(value):
    assert _error_type(Percentage, value) == "out_of_range"


def test_currency_cap():
    assert TypeAdapter(Currency).validate_python(CURRENCY_MAX) == CURRENCY_MAX
    assert _error_type(Currency, 1_000_000_000) == "out_of_range"
    assert _error_type(Currency, 1000000000.00) == "out_of_range"
    assert _error_type(Currency, -1) == "out_of_range"


def test_signed_currency_accepts_negative_variance():
    assert TypeAdapter(SignedCurrency).validate_python(-2500.5) == -2500.5
    assert _error_type(SignedCurrency, -1_000_000_000) == "out_of_range"


def test_numbers_are_never_coerced():
    assert _error_type(Number, "42") == "invalid_type"
    assert _error_type(Number, True) == "invalid_type"
    assert _error_type(Integer, False) == "invalid_type"


def test_int_stays_int():
    value = TypeAdapter(Number).validate_python(7)
    assert value == 7 and isinstance(value, int)
    assert isinstance(TypeAdapter(Integer).validate_python(3.0), int)
    assert _error_type(Integer, 3.5) == "invalid_type"


def test_latitude_bounds():
    assert TypeAdapter(Latitude).validate_python(-90) == -90
    assert _error_type(Latitude, 90.5) == "out_of_range"


# ---- strings --------------------------------------------------------------

@pytest.mark.parametrize("value", ["+15550101", "+15550123", "+447946095800", "+12"])
def test_phone_accepts_e164(value):
    assert TypeAdapter(Phone).validate_python(value) == value


@pytest.mark.parametrize("value", ["555-0101", "15550123", "+05550123", "+1-555-0123", "+1234567890123456", "+1", "+1555\u0660101"])
def test_phone_rejects_non_e164(value):
    assert _error_type(Phone, value) == "invalid_format"


def test_phone_too_long():
    assert _error_type(Phone, "+" + "1" * 20) == "too_long"


@pytest.mark.parametrize(
    "tp,good,bad",
    [
        (MonthStr, "2024-03", ["2024-3", "2024/03", "٢٠٢٤-03", "2024-٠٣"]),
        (TimeOfDay, "08:30", ["8:30", "08.30", "٠٨:30"]),
        (FiscalYear, "2024", ["24", "FY24", "٢٠٢٤", "202٤"]),
    ],
)
def test_digit_patterns_are_ascii_only(tp, good, bad):
    assert TypeAdapter(tp).validate_python(good) == good
    for value in bad:
        assert _error_type(tp, value) == "invalid_format"


def test_dates_reject_non_ascii_digits():
    assert _error_type(ISODate, "2024-03-0١") == "invalid_format"
    assert _error_type(ISODateTime, "2024-03-01T08:30:0٠Z") == "invalid_format"


def test_email():
    assert TypeAdapter(Email).validate_python("head@springfieldschools.org")
    assert _error_type(Email, "not-an-email") == "invalid_format"
    assert _error_type(Email, "a" * 250 + "@x.org") == "too_long"


def test_uuid():
    assert TypeAdapter(UUIDStr).validate_python("2F6C1A7E-3B7D-4C1E-9A55-0D9F6B1E2A01")
    assert _error_type(UUIDStr, "2f6c1a7e3b7d4c1e9a550d9f6b1e2a01") == "invalid_format"


def test_url_allows_empty_string():
    assert TypeAdapter(Url).validate_python("") == ""
    assert TypeAdapter(Url).validate_python("https://springfieldschools.org/about")
    assert _error_type(Url, "not a url") == "invalid_format"


def test_timezone():
    assert TypeAdapter(Timezone).validate_python("America/New_York")
    assert _error_type(Timezone, "EST") == "invalid_format"


@pytest.mark.parametrize("value,kind", [("AB", "too_short"), ("emp-001", "invalid_format"), ("E" * 51, "too_long")])
def test_identifier_number(value, kind):
    assert _error_type(IdentifierNumber, value) == kind


# ---- grades ---------------------------------------------------------------

def test_grade_ordinal_is_numeric_not_lexical():
    assert [grade_ordinal(g) for g in GRADE_ORDER] == list(range(13))
    assert grade_ordinal("10") > grade_ordinal("2")


def test_grade_ordinal_unknown():
    with pytest.raises(ValueError):
        grade_ordinal("13")
