# tests/test_profiles.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from emis.schemas.human_resources import Staff
from emis.schemas.people import ComprehensiveStaffProfile
from emis.schemas.school import ComprehensiveSchoolProfile, SchoolProfileSummary
from emis.schemas.students import ComprehensiveStudentProfile

from .conftest import STAFF_ID, USER_ID


def test_bare_entity_is_a_valid_profile(staff_data, student_data, school_data):
    staff = ComprehensiveStaffProfile.from_wire(staff_data)
    assert staff.extensions() == {}
    assert ComprehensiveStudentProfile.from_wire(student_data).extensions() == {}
    assert ComprehensiveSchoolProfile.from_wire(school_data).extensions() == {}


def test_absent_extensions_are_omitted_from_wire(staff_data):
    wire = ComprehensiveStaffProfile.from_wire(staff_data).to_wire()
    for key in ("salary", "roleAssignments", "performanceMetrics", "retentionData"):
        assert key not in wire
    assert Staff.from_wire(wire).to_wire() == wire


def test_core_fields_stay_mandatory(staff_data):
    del staff_data["employment"]
    with pytest.raises(ValidationError) as exc:
        ComprehensiveStaffProfile.from_wire(staff_data)
    assert exc.value.errors()[0]["loc"] == ("employment",)


@pytest.mark.parametrize("key", ["salary", "roleAssignments", "performanceMetrics", "retentionData"])
def test_null_extension_is_not_absent(staff_data, key):
    staff_data[key] = None
    with pytest.raises(ValidationError) as exc:
        ComprehensiveStaffProfile.from_wire(staff_data)
    assert [e["loc"] for e in exc.value.errors()] == [(key,)]
    assert exc.value.errors()[0]["type"] == "invalid_type"


def test_present_extension_is_validated(staff_data, salary_data):
    staff_data["salary"] = salary_data
    profile = ComprehensiveStaffProfile.from_wire(staff_data)
    assert profile.salary.gross_salary == 55000
    assert set(profile.extensions()) == {"salary"}

    salary_data["grossSalary"] = -10
    with pytest.raises(ValidationError) as exc:
        ComprehensiveStaffProfile.from_wire(staff_data)
    assert exc.value.errors()[0]["loc"] == ("salary", "grossSalary")


def test_core_strips_extensions(staff_data, salary_data):
    staff_data["salary"] = salary_data
    staff_data["performanceMetrics"] = {"teachingEffectiveness": 88, "passRate": 91.5}
    profile = ComprehensiveStaffProfile.from_wire(staff_data)
    core = profile.core()
    assert type(core) is Staff
    assert core.staff_id == STAFF_ID
    assert "salary" not in core.to_wire()


def test_extension_names_exclude_core_fields():
    names = ComprehensiveStaffProfile.extension_names()
    assert "salary" in names and "retention_data" in names
    assert "staff_id" not in names


def test_student_profile_extensions(student_data):
    student_data["medical"] = {"bloodType": "O+", "emergencyContact": "Jo Marsh +15550199"}
    student_data["awards"] = ["Science Fair 2024"]
    profile = ComprehensiveStudentProfile.from_wire(student_data)
    assert profile.medical.blood_type == "O+"
    assert profile.to_wire()["overallGPA"] == 3.4

    student_data["medical"]["bloodType"] = "C+"
    with pytest.raises(ValidationError) as exc:
        ComprehensiveStudentProfile.from_wire(student_data)
    assert exc.value.errors()[0]["loc"] == ("medical", "bloodType")


def test_school_profile_extensions(school_data):
    school_data["principalUserId"] = USER_ID
    school_data["accreditationInfo"] = {"accreditedBy": ["State Board"], "accreditationExpiry": "2027-06-30"}
    school_data["logoUrl"] = ""
    profile = ComprehensiveSchoolProfile.from_wire(school_data)
    assert profile.accreditation_info.accredited_by == ["State Board"]
    assert type(profile.core()) is SchoolProfileSummary

    school_data["accreditationInfo"]["accreditationExpiry"] = "2027-02-30"
    with pytest.raises(ValidationError):
        ComprehensiveSchoolProfile.from_wire(school_data)
