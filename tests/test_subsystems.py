# tests/test_subsystems.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from emis.analytics import average_utilization
from emis.schemas.administrative import SpecialNeedsClassification, TeacherAgeDistribution
from emis.schemas.analytics import TSDLAnalytics
from emis.schemas.financial import Budget, BudgetVariance, SupplyAnalytics
from emis.schemas.learning_outcomes import Grade

from .conftest import BUDGET_ID, SCHOOL_ID, STAFF_ID, STUDENT_ID, USER_ID, YEAR_ID


def _supply_analytics(breakdown: dict) -> dict:
    return {
        "schoolId": SCHOOL_ID,
        "totalItems": 420,
        "totalValue": 125000,
        "categoryBreakdown": breakdown,
        "lowStockItems": [],
        "trends": [],
    }


def test_supply_breakdown_scenario():
    data = _supply_analytics(
        {"textbooks": {"itemCount": 420, "totalValue": 125000, "averageUtilization": 92.0}}
    )
    analytics = SupplyAnalytics.from_wire(data)
    assert analytics.category_breakdown["textbooks"].item_count == 420
    assert average_utilization(analytics.category_breakdown) == 92.0


def test_breakdown_maps_accept_open_keys_and_validate_entries():
    data = _supply_analytics(
        {
            "textbooks": {"itemCount": 10, "totalValue": 100, "averageUtilization": 80},
            "robotics_kits": {"itemCount": 2, "totalValue": 900, "averageUtilization": 120},
        }
    )
    with pytest.raises(ValidationError) as exc:
        SupplyAnalytics.from_wire(data)
    err = exc.value.errors()[0]
    assert err["loc"] == ("categoryBreakdown", "robotics_kits", "averageUtilization")
    assert err["type"] == "out_of_range"


def test_budget_round_trip(budget_data):
    budget = Budget.from_wire(budget_data)
    assert budget.line_items[0].remaining_amount == 60000
    assert Budget.from_wire(budget.to_wire()) == budget


def test_budget_status_enum_is_closed(budget_data):
    budget_data["lineItems"][1]["status"] = "done"
    with pytest.raises(ValidationError) as exc:
        Budget.from_wire(budget_data)
    assert exc.value.errors()[0]["loc"] == ("lineItems", 1, "status")


def test_budget_variance_may_be_negative():
    variance = BudgetVariance.from_wire(
        {
            "budgetId": BUDGET_ID,
            "category": "technology",
            "allocatedAmount": 100000,
            "spentAmount": 40000,
            "variance": -60000,
            "variancePercentage": -60,
            "status": "under_budget",
        }
    )
    assert variance.variance == -60000


def _grade(value) -> dict:
    return {
        "gradeId": USER_ID,
        "studentId": STUDENT_ID,
        "subjectId": USER_ID,
        "classroomId": USER_ID,
        "academicYearId": YEAR_ID,
        "gradeValue": value,
        "gradeType": "exam",
        "recordedDate": "2024-11-04",
        "recordedBy": STAFF_ID,
    }


@pytest.mark.parametrize("value", [0, 87.5, 100, "B+", "Incomplete"])
def test_grade_value_number_or_letter(value):
    assert Grade.from_wire(_grade(value)).grade_value == value


@pytest.mark.parametrize("value,kind", [(101, "out_of_range"), ("Outstanding!", "too_long"), (True, "invalid_type")])
def test_grade_value_rejections(value, kind):
    with pytest.raises(ValidationError) as exc:
        Grade.from_wire(_grade(value))
    err = exc.value.errors()[0]
    assert err["loc"] == ("gradeValue",)
    assert err["type"] == kind


def test_age_distribution_wire_keys():
    data = {"under30": 4, "30-40": 9, "40-50": 7, "50-60": 3, "over60": 1}
    dist = TeacherAgeDistribution.from_wire(data)
    assert dist.age_30_40 == 9
    assert dist.to_wire() == data


def test_special_needs_plan_aliases():
    data = {"category": "learning_disability", "requiresIEP": True, "supportServices": ["extended_time"]}
    parsed = SpecialNeedsClassification.from_wire(data)
    assert parsed.requires_iep is True
    wire = parsed.to_wire()
    assert wire["requiresIEP"] is True
    assert wire["requires504"] is False


def test_tsdl_analytics():
    data = {
        "staffId": STAFF_ID,
        "academicYearId": YEAR_ID,
        "schoolId": SCHOOL_ID,
        "totalStudents": 28,
        "averageStudentGrade": 78.4,
        "passRate": 89.3,
        "studentPerformanceTrends": [
            {
                "studentId": STUDENT_ID,
                "studentName": "Lena Marsh",
                "period": "2024-Q1",
                "averageGrade": 74,
                "gradeTrend": "improving",
            }
        ],
        "gradeDistribution": [{"range": "70-79", "count": 11, "percentage": 39.3}],
        "strugglingStudents": [
            {"studentId": STUDENT_ID, "studentName": "Lena Marsh", "currentGrade": 58, "riskLevel": "medium"}
        ],
        "excellingStudents": [],
        "lastUpdated": "2024-11-30",
    }
    tsdl = TSDLAnalytics.from_wire(data)
    assert tsdl.struggling_students[0].risk_level == "medium"
    assert TSDLAnalytics.from_wire(tsdl.to_wire()) == tsdl

    data["strugglingStudents"][0]["riskLevel"] = "severe"
    with pytest.raises(ValidationError):
        TSDLAnalytics.from_wire(data)
