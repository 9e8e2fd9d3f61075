# schemas/financial/budget.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    Currency,
    EMISModel,
    FiscalYear,
    ISODate,
    Number,
    Percentage,
    SignedCurrency,
    UUIDStr,
)

BudgetCategory = Literal[
    "personnel",
    "instructional_materials",
    "facilities",
    "technology",
    "transportation",
    "utilities",
    "maintenance",
    "professional_development",
    "student_services",
    "administrative",
    "other",
]
LineItemStatus = Literal["planned", "approved", "in_progress", "completed", "cancelled"]
BudgetType = Literal["operational", "capital", "program_specific", "emergency", "other"]
BudgetStatus = Literal["draft", "approved", "active", "closed", "cancelled"]
VarianceStatus = Literal["under_budget", "on_budget", "over_budget"]


class BudgetLineItem(EMISModel):
    line_item_id: UUIDStr
    budget_id: UUIDStr
    category: BudgetCategory
    description: str = Field(..., min_length=1, max_length=500)
    allocated_amount: Currency
    spent_amount: Currency = 0
    remaining_amount: Currency
    vendor: Optional[str] = Field(None, max_length=255)
    status: LineItemStatus


class Budget(EMISModel):
    """
    A budget for one school and fiscal period.

    The totals are stored, not derived; ``emis.rules.check_budget_balance``
    verifies them against the line items.
    """
    budget_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    budget_name: str = Field(..., min_length=1, max_length=255)
    budget_type: BudgetType
    fiscal_year: FiscalYear
    start_date: ISODate
    end_date: ISODate
    total_allocated: Currency
    total_spent: Currency = 0
    total_remaining: Currency
    line_items: list[BudgetLineItem]
    status: BudgetStatus
    approved_by: Optional[UUIDStr] = None
    approved_date: Optional[ISODate] = None


class BudgetVariance(EMISModel):
    budget_id: UUIDStr
    category: BudgetCategory
    allocated_amount: Currency
    spent_amount: Currency
    # spent - allocated: negative is under budget, positive is over
    variance: SignedCurrency
    variance_percentage: Number
    status: VarianceStatus


class CategorySpending(EMISModel):
    allocated: Currency
    spent: Currency
    remaining: Currency
    spending_rate: Percentage


class BudgetTrend(EMISModel):
    period: str
    allocated: Currency
    spent: Currency
    spending_rate: Percentage


class BudgetAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_allocated: Currency
    total_spent: Currency
    total_remaining: Currency
    spending_rate: Percentage  # share of the budget spent
    category_breakdown: dict[str, CategorySpending]
    trends: list[BudgetTrend]
    variances: list[BudgetVariance]
