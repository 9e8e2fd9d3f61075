# tests/test_rules.py
from __future__ import annotations

import pytest

from emis.exceptions import BusinessRuleError
from emis.rules import (
    check_budget_balance,
    check_grade_range,
    check_line_item_balance,
    check_primary_roles,
    check_ratio_reciprocity,
    check_version_increment,
    compare_grades,
    run_rules,
    sort_trends,
    trend_delta,
)
from emis.schemas.base import AuditFields
from emis.schemas.financial import Budget, BudgetTrend
from emis.schemas.human_resources import Staff
from emis.schemas.people import ComprehensiveRatioTrend, ComprehensiveStaffProfile
from emis.validation import ValidationSeverity, ViolationKind

from .conftest import ROLE_ID_2, USER_ID


def _trend(month: str, s2t: float, t2s: float) -> ComprehensiveRatioTrend:
    return ComprehensiveRatioTrend.from_wire(
        {
            "month": month,
            "studentToTeacherRatio": s2t,
            "teacherToStudentRatio": t2s,
            "studentCount": 500,
            "teacherCount": 20,
        }
    )


# ---- ratios ---------------------------------------------------------------

def test_reciprocal_ratios_pass():
    assert check_ratio_reciprocity(_trend("2024-09", 25, 0.04)) == []


def test_non_reciprocal_ratio_flagged():
    violations = check_ratio_reciprocity(_trend("2024-09", 25, 0.05))
    assert len(violations) == 1
    assert violations[0].kind is ViolationKind.CROSS_FIELD
    assert violations[0].path == ("teacherToStudentRatio",)


def test_reciprocity_tolerance_and_sequences():
    trends = [_trend("2024-09", 25, 0.04), _trend("2024-10", 3, 0.3333)]
    assert [v.path for v in check_ratio_reciprocity(trends)] == [(1, "teacherToStudentRatio")]
    assert check_ratio_reciprocity(trends, tolerance=1e-3) == []


# ---- versions -------------------------------------------------------------

def _audit(version: int) -> AuditFields:
    return AuditFields.from_wire(
        {
            "createdAt": "2024-01-01T09:00:00Z",
            "createdBy": USER_ID,
            "updatedAt": "2024-01-02T09:00:00Z",
            "updatedBy": USER_ID,
            "version": version,
        }
    )


@pytest.mark.parametrize("current,ok", [(4, True), (3, False), (5, False), (2, False)])
def test_version_increment(current, ok):
    violations = check_version_increment(_audit(3), _audit(current))
    assert (violations == []) is ok
    if not ok:
        assert violations[0].path == ("version",)


# ---- primary roles --------------------------------------------------------

@pytest.fixture
def two_primaries(staff_data) -> Staff:
    second = dict(staff_data["roles"][0], roleId=ROLE_ID_2, roleType="counselor", startDate="2022-01-10")
    staff_data["roles"].append(second)
    return Staff.from_wire(staff_data)


def test_primary_roles_ignored_by_default_policy(two_primaries):
    assert check_primary_roles(two_primaries, "ignore") == []


def test_primary_roles_warn(two_primaries):
    violations = check_primary_roles(two_primaries, "warn")
    assert [v.location for v in violations] == ["roles.1.isPrimary"]
    assert violations[0].severity is ValidationSeverity.WARNING


def test_primary_roles_error(two_primaries):
    with pytest.raises(BusinessRuleError) as exc:
        check_primary_roles(two_primaries, "error")
    assert exc.value.rule == "primary_role_overlap"
    assert len(exc.value.violations) == 1


def test_sequential_primary_roles_do_not_overlap(staff_data):
    staff_data["roles"][0]["endDate"] = "2021-12-31"
    later = dict(staff_data["roles"][0], roleId=ROLE_ID_2, startDate="2022-01-01")
    del later["endDate"]
    staff_data["roles"].append(later)
    assert check_primary_roles(Staff.from_wire(staff_data), "error") == []


# ---- budgets --------------------------------------------------------------

def test_balanced_budget(budget_data):
    assert check_budget_balance(Budget.from_wire(budget_data)) == []


def test_unbalanced_budget(budget_data):
    budget_data["totalRemaining"] = 80000
    budget_data["lineItems"][1]["remainingAmount"] = 25000
    budget = Budget.from_wire(budget_data)
    locations = [v.location for v in check_budget_balance(budget)]
    assert locations == ["totalRemaining", "lineItems.1.remainingAmount"]
    assert check_line_item_balance(budget.line_items[0]) == []


# ---- grades ---------------------------------------------------------------

def test_compare_grades():
    assert compare_grades("K", "1") == -1
    assert compare_grades("10", "2") == 1
    assert compare_grades("7", "7") == 0


def test_check_grade_range():
    assert check_grade_range("K", "12") == []
    assert check_grade_range("9", "3")[0].kind is ViolationKind.CROSS_FIELD
    assert check_grade_range("0", "3")[0].kind is ViolationKind.INVALID_CHOICE


# ---- trends ---------------------------------------------------------------

def test_trend_delta_sorts_first():
    trends = [
        BudgetTrend(period="2024", allocated=300, spent=270, spending_rate=90),
        BudgetTrend(period="2022", allocated=100, spent=50, spending_rate=50),
        BudgetTrend(period="2023", allocated=200, spent=150, spending_rate=75),
    ]
    assert [t.period for t in sort_trends(trends)] == ["2022", "2023", "2024"]
    assert trend_delta(trends, "spending_rate") == 40
    assert trend_delta(trends, "spendingRate") == 40


def test_trend_delta_edges():
    assert trend_delta([], "value") is None
    assert trend_delta([{"period": "2024-01", "value": 5}], "value") == 0
    points = [{"month": "2024-02", "value": 9}, {"month": "2024-01", "value": 4}]
    assert trend_delta(points, "value", key="month") == 5


# ---- dispatch -------------------------------------------------------------

def test_run_rules_on_profile(staff_data):
    second = dict(staff_data["roles"][0], roleId=ROLE_ID_2, roleType="counselor")
    staff_data["roles"].append(second)
    profile = ComprehensiveStaffProfile.from_wire(staff_data)
    assert run_rules(profile, "ignore") == []
    assert len(run_rules(profile, "warn")) == 1


def test_run_rules_without_rules(address):
    from emis.schemas.base import Address

    assert run_rules(Address.from_wire(address)) == []
