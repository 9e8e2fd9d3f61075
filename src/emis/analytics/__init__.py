# src/emis/analytics/__init__.py
"""Builders that recompute analytics aggregates from the underlying records."""
from .budget import budget_variances, build_budget_analytics, variance_status
from .salary import build_salary_analytics, salary_band
from .staffing import build_ratio_trend, build_role_distribution, current_role
from .supplies import average_utilization, build_supply_analytics, low_stock, order_trends

__all__ = [
    "average_utilization",
    "build_supply_analytics",
    "low_stock",
    "order_trends",
    "build_budget_analytics",
    "budget_variances",
    "variance_status",
    "build_salary_analytics",
    "salary_band",
    "build_ratio_trend",
    "build_role_distribution",
    "current_role",
]
