# tests/test_validation.py
from __future__ import annotations

import pytest

from emis.exceptions import RecordValidationError, SchemaNotFoundError
from emis.schemas.human_resources import Staff
from emis.schemas.people import ComprehensiveStaffProfile
from emis.validation import (
    SCHEMA_REGISTRY,
    ValidationResult,
    ViolationKind,
    get_schema,
    list_schemas,
    validate,
    validate_many,
    validate_or_raise,
)


def test_valid_record(staff_data):
    result = validate(Staff, staff_data)
    assert isinstance(result, ValidationResult)
    assert result.valid
    assert result.violations == []
    assert isinstance(result.record, Staff)
    assert result.schema_name == "Staff"


def test_collects_every_violation(staff_data):
    staff_data["employeeNumber"] = "x"
    staff_data["contactInfo"]["phone"] = "5550123"
    staff_data["roles"][0]["roleType"] = "wizard"
    del staff_data["employment"]

    result = validate(Staff, staff_data)
    assert not result.valid
    assert result.record is None
    by_location = {v.location: v.kind for v in result.violations}
    assert by_location == {
        "employeeNumber": ViolationKind.TOO_SHORT,
        "contactInfo.phone": ViolationKind.INVALID_FORMAT,
        "employment": ViolationKind.MISSING,
        "roles.0.roleType": ViolationKind.INVALID_CHOICE,
    }


def test_violation_details(staff_data):
    staff_data["roles"][0]["schoolId"] = "nope"
    violation = validate(Staff, staff_data).violations[0]
    assert violation.path == ("roles", 0, "schoolId")
    assert violation.location == "roles.0.schoolId"
    assert violation.input == "nope"
    assert violation.to_dict()["kind"] == "invalid_format"


def test_null_optional_fields_rejected(staff_data):
    staff_data.update(qualifications=None, gender=None, middleName=None)
    result = validate(Staff, staff_data)
    assert not result.valid
    assert {v.path: v.kind for v in result.violations} == {
        ("middleName",): ViolationKind.INVALID_TYPE,
        ("gender",): ViolationKind.INVALID_TYPE,
        ("qualifications",): ViolationKind.INVALID_TYPE,
    }


def test_null_extension_rejected(staff_data):
    staff_data["salary"] = None
    result = validate(ComprehensiveStaffProfile, staff_data)
    assert not result.valid
    assert [(v.location, v.kind) for v in result.violations] == [("salary", ViolationKind.INVALID_TYPE)]


def test_omitted_optional_fields_still_valid(staff_data):
    for key in ("qualifications", "gender", "middleName"):
        staff_data.pop(key, None)
    assert validate(Staff, staff_data).valid


def test_missing_field_has_no_input(staff_data):
    del staff_data["firstName"]
    violation = validate(Staff, staff_data).violations[0]
    assert violation.kind is ViolationKind.MISSING
    assert violation.input is None


def test_non_object_input_is_a_type_violation():
    result = validate(Staff, ["not", "an", "object"])
    assert not result.valid
    assert result.violations[0].kind is ViolationKind.INVALID_TYPE


def test_cross_field_kind():
    result = validate("GradeRange", {"lowestGrade": "9", "highestGrade": "K"})
    assert [v.kind for v in result.violations] == [ViolationKind.CROSS_FIELD]


def test_validation_is_idempotent(staff_data):
    record = validate(Staff, staff_data).record
    again = validate(Staff, record.to_wire())
    assert again.valid and again.record == record

    staff_data["roles"][0]["startDate"] = "2019-02-30"
    first = validate(Staff, staff_data)
    second = validate(Staff, staff_data)
    assert first.violations == second.violations


def test_validate_or_raise(staff_data):
    assert validate_or_raise(Staff, staff_data).first_name == "Ada"
    staff_data["lastName"] = ""
    with pytest.raises(RecordValidationError) as exc:
        validate_or_raise(Staff, staff_data)
    err = exc.value
    assert err.schema_name == "Staff"
    assert [v.location for v in err.violations] == ["lastName"]
    assert err.to_dict()["violations"][0]["kind"] == "too_short"


def test_validate_many_keeps_order(staff_data):
    bad = {**staff_data, "staffId": "bad"}
    results = validate_many(Staff, [staff_data, bad, staff_data])
    assert [r.valid for r in results] == [True, False, True]


def test_registry_lookup():
    assert get_schema("ComprehensiveStaffProfile") is ComprehensiveStaffProfile
    names = list_schemas()
    assert names == sorted(names)
    for name in ("Address", "Budget", "SupplyAnalytics", "TSDLAnalytics", "CreateSchoolForm", "PeopleDashboardData"):
        assert name in names
    assert "EMISModel" not in names
    assert SCHEMA_REGISTRY["Staff"] is Staff


def test_registry_unknown_name():
    with pytest.raises(SchemaNotFoundError) as exc:
        get_schema("Teacher")
    assert exc.value.schema_name == "Teacher"
    assert "Staff" in exc.value.available


def test_validate_by_name(staff_data):
    assert validate("Staff", staff_data).valid
