# src/emis/analytics/budget.py
"""Recompute ``BudgetAnalytics`` from budgets and their line items."""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional

from emis.app_logger import get_logger
from emis.schemas.financial.budget import (
    Budget,
    BudgetAnalytics,
    BudgetTrend,
    BudgetVariance,
    CategorySpending,
)

from ._util import money, percent, present

log = get_logger("analytics.budget")

# differences under a cent count as on budget
ON_BUDGET_TOLERANCE = 0.005


def variance_status(variance: float) -> str:
    if variance < -ON_BUDGET_TOLERANCE:
        return "under_budget"
    if variance > ON_BUDGET_TOLERANCE:
        return "over_budget"
    return "on_budget"


def budget_variances(budget: Budget) -> list[BudgetVariance]:
    """One variance per category present in the budget; variance is spent - allocated."""
    allocated: dict[str, float] = defaultdict(float)
    spent: dict[str, float] = defaultdict(float)
    for item in budget.line_items:
        allocated[item.category] += item.allocated_amount
        spent[item.category] += item.spent_amount

    out: list[BudgetVariance] = []
    for category in sorted(allocated):
        variance = money(spent[category] - allocated[category])
        out.append(
            BudgetVariance(
                budget_id=budget.budget_id,
                category=category,
                allocated_amount=money(allocated[category]),
                spent_amount=money(spent[category]),
                variance=variance,
                variance_percentage=percent(variance, allocated[category], cap=False),
                status=variance_status(variance),
            )
        )
    return out


def build_budget_analytics(
    budgets: Iterable[Budget],
    school_id: Optional[str] = None,
    academic_year_id: Optional[str] = None,
) -> BudgetAnalytics:
    """
    Totals, per-category spending, per-fiscal-year trend and variances.

    Spending rates are capped at 100 because they are stored as percentages;
    overspend shows up in the variances instead.
    """
    budgets = list(budgets)
    cat_alloc: dict[str, float] = defaultdict(float)
    cat_spent: dict[str, float] = defaultdict(float)
    year_alloc: dict[str, float] = defaultdict(float)
    year_spent: dict[str, float] = defaultdict(float)
    variances: list[BudgetVariance] = []

    for budget in budgets:
        year_alloc[budget.fiscal_year] += budget.total_allocated
        year_spent[budget.fiscal_year] += budget.total_spent
        for item in budget.line_items:
            cat_alloc[item.category] += item.allocated_amount
            cat_spent[item.category] += item.spent_amount
        variances.extend(budget_variances(budget))

    breakdown = {
        category: CategorySpending(
            allocated=money(cat_alloc[category]),
            spent=money(cat_spent[category]),
            remaining=money(max(cat_alloc[category] - cat_spent[category], 0)),
            spending_rate=percent(cat_spent[category], cat_alloc[category]),
        )
        for category in sorted(cat_alloc)
    }
    trends = [
        BudgetTrend(
            period=year,
            allocated=money(year_alloc[year]),
            spent=money(year_spent[year]),
            spending_rate=percent(year_spent[year], year_alloc[year]),
        )
        for year in sorted(year_alloc)
    ]

    total_allocated = sum(b.total_allocated for b in budgets)
    total_spent = sum(b.total_spent for b in budgets)
    analytics = BudgetAnalytics(
        **present(school_id=school_id, academic_year_id=academic_year_id),
        total_allocated=money(total_allocated),
        total_spent=money(total_spent),
        total_remaining=money(max(total_allocated - total_spent, 0)),
        spending_rate=percent(total_spent, total_allocated),
        category_breakdown=breakdown,
        trends=trends,
        variances=variances,
    )
    log.debug("budget analytics: %d budget(s), %d variance(s)", len(budgets), len(variances))
    return analytics
