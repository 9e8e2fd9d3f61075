# schemas/financial/financial_analytics.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    Currency,
    EMISModel,
    ISODate,
    Number,
    Percentage,
    SignedCurrency,
    UUIDStr,
)
from .budget import BudgetAnalytics
from .fees import FeeCollectionAnalytics
from .supplies import SupplyAnalytics

HealthIndicatorKind = Literal[
    "solvency",
    "liquidity",
    "efficiency",
    "sustainability",
    "debt_ratio",
    "reserve_ratio",
]
HealthStatus = Literal["excellent", "good", "acceptable", "concerning", "critical"]
TrendDirection = Literal["improving", "stable", "declining"]


class AmountShare(EMISModel):
    amount: Currency
    percentage: Percentage


class FinancialSummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    total_revenue: Currency
    total_expenditure: Currency
    net_balance: SignedCurrency  # revenue - expenditure
    revenue_sources: dict[str, AmountShare]
    expenditure_categories: dict[str, AmountShare]
    budget_variance: SignedCurrency  # actual - budget
    budget_variance_percentage: Number


class FinancialTrend(EMISModel):
    period: str = Field(..., min_length=1)
    revenue: Currency
    expenditure: Currency
    net_balance: SignedCurrency
    budget_allocated: Optional[Currency] = None
    budget_spent: Optional[Currency] = None


class FinancialHealthIndicator(EMISModel):
    indicator: HealthIndicatorKind
    value: Number
    status: HealthStatus
    benchmark: Optional[Number] = None
    trend: Optional[TrendDirection] = None


class FinancialForecast(EMISModel):
    period: str
    projected_revenue: Currency
    projected_expenditure: Currency
    projected_balance: SignedCurrency


class FinancialAnalytics(EMISModel):
    """Roll-up of the budget, fee and supply analytics for one school-year."""
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    summary: FinancialSummary
    budget_analytics: BudgetAnalytics
    fee_analytics: FeeCollectionAnalytics
    supply_analytics: SupplyAnalytics
    trends: list[FinancialTrend]
    health_indicators: list[FinancialHealthIndicator]
    forecasts: Optional[list[FinancialForecast]] = None
    last_updated: ISODate
