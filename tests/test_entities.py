# tests/test_entities.py
from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from emis.schemas.base import GRADE_ORDER
from emis.schemas.human_resources import Staff
from emis.schemas.school import GradeRange, SchoolProfileSummary
from emis.schemas.students import StudentProfileSummary


# ---- staff ----------------------------------------------------------------

def test_staff_round_trip(staff_data):
    staff = Staff.from_wire(staff_data)
    assert staff.roles[0].is_primary is True
    assert Staff.from_wire(staff.to_wire()) == staff


def test_staff_requires_required_contact(staff_data):
    del staff_data["contactInfo"]["phone"]
    with pytest.raises(ValidationError) as exc:
        Staff.from_wire(staff_data)
    assert exc.value.errors()[0]["loc"] == ("contactInfo", "phone")


def test_staff_role_type_is_closed_enum(staff_data):
    staff_data["roles"][0]["roleType"] = "headmaster"
    with pytest.raises(ValidationError) as exc:
        Staff.from_wire(staff_data)
    err = exc.value.errors()[0]
    assert err["type"] == "literal_error"
    assert err["loc"] == ("roles", 0, "roleType")


def test_staff_may_hold_several_roles(staff_data):
    extra = dict(staff_data["roles"][0], roleType="counselor", isPrimary=False)
    staff_data["roles"].append(extra)
    assert len(Staff.from_wire(staff_data).roles) == 2


# ---- students -------------------------------------------------------------

def test_student_gpa_alias(student_data):
    student = StudentProfileSummary.from_wire(student_data)
    assert student.overall_gpa == 3.4
    wire = student.to_wire()
    assert wire["overallGPA"] == 3.4
    assert "overallGpa" not in wire


def test_student_gpa_bounds(student_data):
    student_data["overallGPA"] = 4.5
    with pytest.raises(ValidationError):
        StudentProfileSummary.from_wire(student_data)


# ---- school ---------------------------------------------------------------

def test_school_round_trip(school_data):
    school = SchoolProfileSummary.from_wire(school_data)
    assert SchoolProfileSummary.from_wire(school.to_wire()) == school


@pytest.mark.parametrize("capacity,ok", [(1, True), (50000, True), (0, False), (50001, False)])
def test_school_capacity(school_data, capacity, ok):
    school_data["maxStudentCapacity"] = capacity
    if ok:
        assert SchoolProfileSummary.from_wire(school_data).max_student_capacity == capacity
    else:
        with pytest.raises(ValidationError):
            SchoolProfileSummary.from_wire(school_data)


@pytest.mark.parametrize("lowest,highest", list(itertools.product(GRADE_ORDER, GRADE_ORDER)))
def test_grade_range_ordering(lowest, highest):
    data = {"lowestGrade": lowest, "highestGrade": highest}
    if GRADE_ORDER.index(lowest) <= GRADE_ORDER.index(highest):
        assert GradeRange.from_wire(data).highest_grade == highest
    else:
        with pytest.raises(ValidationError) as exc:
            GradeRange.from_wire(data)
        err = exc.value.errors()[0]
        assert err["type"] == "cross_field"
        assert err["loc"] == ("highestGrade",)


def test_grade_range_lexical_trap():
    # "10" < "2" as strings, but grade 2 to grade 10 is a valid range
    assert GradeRange.from_wire({"lowestGrade": "2", "highestGrade": "10"})


def test_grade_range_unknown_grade():
    with pytest.raises(ValidationError) as exc:
        GradeRange.from_wire({"lowestGrade": "13", "highestGrade": "12"})
    assert [e["loc"] for e in exc.value.errors()] == [("lowestGrade",)]
