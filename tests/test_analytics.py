# tests/test_analytics.py
from __future__ import annotations

import pytest

from emis.analytics import (
    average_utilization,
    build_budget_analytics,
    build_ratio_trend,
    build_role_distribution,
    build_salary_analytics,
    build_supply_analytics,
    salary_band,
)
from emis.rules import check_ratio_reciprocity
from emis.schemas.financial import Budget, SupplyAnalytics, SupplyItem, SupplyOrder, SupplyUtilization
from emis.schemas.human_resources import Staff, StaffSalaryRecord

from .conftest import SCHOOL_ID, STAFF_ID, YEAR_ID

ITEM_A = "11111111-1111-4111-8111-111111111111"
ITEM_B = "22222222-2222-4222-8222-222222222222"
ITEM_C = "33333333-3333-4333-8333-333333333333"


def _item(item_id: str, category: str, on_hand: float, unit_cost: float, reorder=None) -> SupplyItem:
    extra = {} if reorder is None else {"reorder_level": reorder}
    return SupplyItem(
        item_id=item_id,
        school_id=SCHOOL_ID,
        item_name=f"{category} item",
        category=category,
        unit_cost=unit_cost,
        quantity_on_hand=on_hand,
        status="available",
        **extra,
    )


def _utilization(item_id: str, rate: float) -> SupplyUtilization:
    return SupplyUtilization(
        item_id=item_id,
        school_id=SCHOOL_ID,
        academic_year_id=YEAR_ID,
        total_available=100,
        total_used=rate,
        total_distributed=rate,
        utilization_rate=rate,
    )


def _order(order_id: str, date: str, cost: float, status: str = "received") -> SupplyOrder:
    return SupplyOrder(
        order_id=order_id,
        school_id=SCHOOL_ID,
        order_date=date,
        items=[],
        total_cost=cost,
        supplier="Acme Books",
        status=status,
    )


# ---- supplies -------------------------------------------------------------

def test_single_category_average_utilization_is_exact():
    analytics = SupplyAnalytics.from_wire(
        {
            "totalItems": 420,
            "totalValue": 125000,
            "categoryBreakdown": {
                "textbooks": {"itemCount": 420, "totalValue": 125000, "averageUtilization": 92.0}
            },
            "lowStockItems": [],
            "trends": [],
        }
    )
    assert average_utilization(analytics.category_breakdown) == 92.0


def test_average_utilization_is_unweighted_mean():
    analytics = build_supply_analytics(
        [_item(ITEM_A, "textbooks", 10, 20), _item(ITEM_B, "paper", 5, 4)],
        [_utilization(ITEM_A, 90), _utilization(ITEM_B, 60)],
    )
    assert average_utilization(analytics.category_breakdown) == 75.0
    assert average_utilization({}) == 0.0


def test_build_supply_analytics():
    items = [
        _item(ITEM_A, "textbooks", 100, 25.5),
        _item(ITEM_B, "textbooks", 0, 10, reorder=5),
        _item(ITEM_C, "paper", 3, 4, reorder=10),
    ]
    utilizations = [_utilization(ITEM_A, 80), _utilization(ITEM_B, 100), _utilization(ITEM_C, 45)]
    orders = [
        _order(ITEM_A, "2024-09-03", 300),
        _order(ITEM_B, "2024-08-20", 100),
        _order(ITEM_C, "2024-09-15", 500),
        _order(ITEM_C, "2024-09-30", 999, status="cancelled"),
    ]
    analytics = build_supply_analytics(items, utilizations, orders, school_id=SCHOOL_ID)

    assert analytics.total_items == 3
    assert analytics.total_value == 2562.0
    textbooks = analytics.category_breakdown["textbooks"]
    assert textbooks.item_count == 2
    assert textbooks.average_utilization == 90.0
    assert {i.item_id: i.status for i in analytics.low_stock_items} == {
        ITEM_B: "out_of_stock",
        ITEM_C: "low_stock",
    }
    assert [(t.period, t.total_orders, t.total_cost) for t in analytics.trends] == [
        ("2024-08", 1, 100),
        ("2024-09", 2, 800),
    ]
    assert analytics.trends[1].average_order_value == 400
    # the aggregate is itself a valid record
    assert SupplyAnalytics.from_wire(analytics.to_wire()) == analytics


# ---- budgets --------------------------------------------------------------

def test_build_budget_analytics(budget_data):
    analytics = build_budget_analytics([Budget.from_wire(budget_data)])
    assert analytics.total_allocated == 150000
    assert analytics.total_remaining == 90000
    assert analytics.spending_rate == 40.0
    assert analytics.category_breakdown["technology"].spending_rate == 40.0
    assert [t.period for t in analytics.trends] == ["2024"]
    statuses = {v.category: (v.variance, v.status) for v in analytics.variances}
    assert statuses == {"facilities": (-30000, "under_budget"), "technology": (-60000, "under_budget")}


def test_overspent_category(budget_data):
    item = budget_data["lineItems"][1]
    item.update(spentAmount=60000, remainingAmount=0)
    budget_data.update(totalSpent=100000, totalRemaining=50000)
    analytics = build_budget_analytics([Budget.from_wire(budget_data)])
    facilities = next(v for v in analytics.variances if v.category == "facilities")
    assert facilities.variance == 10000
    assert facilities.variance_percentage == 20.0
    assert facilities.status == "over_budget"
    assert analytics.category_breakdown["facilities"].spending_rate == 100.0


# ---- salaries -------------------------------------------------------------

def test_salary_band():
    assert salary_band(55000) == "$50k-$60k"
    assert salary_band(9999.99) == "$0k-$10k"


def test_build_salary_analytics(salary_data):
    other = dict(salary_data, salaryId=ITEM_A, staffId=ITEM_B, grossSalary=41000)
    gone = dict(salary_data, salaryId=ITEM_C, staffId=ITEM_C, grossSalary=90000, status="terminated")
    records = [StaffSalaryRecord.from_wire(d) for d in (salary_data, other, gone)]
    analytics = build_salary_analytics(records, {STAFF_ID: "teacher", ITEM_B: "counselor"})

    assert analytics.total_salary_expenditure == 96000
    assert analytics.average_salary == 48000
    assert analytics.median_salary == 48000
    assert set(analytics.salary_by_role) == {"teacher", "counselor"}
    assert [b.range for b in analytics.salary_distribution] == ["$40k-$50k", "$50k-$60k"]
    assert analytics.trends[0].staff_count == 2


# ---- staffing -------------------------------------------------------------

def test_build_ratio_trend_is_reciprocal():
    trend = build_ratio_trend("2024-09", 487, 23, passRate=88.0)
    assert trend.pass_rate == 88.0
    assert check_ratio_reciprocity(trend) == []


def test_build_ratio_trend_needs_people():
    with pytest.raises(ValueError):
        build_ratio_trend("2024-09", 100, 0)


def test_build_role_distribution(staff_data):
    teacher = Staff.from_wire(staff_data)
    counselor_data = dict(staff_data, staffId=ITEM_A)
    counselor_data["roles"] = [dict(staff_data["roles"][0], roleType="counselor")]
    counselor = Staff.from_wire(counselor_data)
    second_teacher = Staff.from_wire(dict(staff_data, staffId=ITEM_B))

    dist = build_role_distribution(
        [teacher, counselor, second_teacher], salaries={STAFF_ID: 50000, ITEM_B: 60000}
    )
    assert [(d.role_type, d.count) for d in dist] == [("teacher", 2), ("counselor", 1)]
    assert dist[0].percentage == 66.67
    assert dist[0].average_salary == 55000
    assert dist[1].average_salary is None
