# src/emis/analytics/supplies.py
"""Recompute ``SupplyAnalytics`` from supply items, utilization and orders."""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Mapping, Optional

from emis.app_logger import get_logger
from emis.schemas.financial.supplies import (
    LowStockItem,
    SupplyAnalytics,
    SupplyCategoryBreakdown,
    SupplyItem,
    SupplyOrder,
    SupplyTrend,
    SupplyUtilization,
)

from ._util import mean, money, present

log = get_logger("analytics.supplies")


def average_utilization(category_breakdown: Mapping[str, SupplyCategoryBreakdown]) -> float:
    """
    Mean ``averageUtilization`` across categories, unweighted.

    A single category returns its own value unchanged.
    """
    return mean(c.average_utilization for c in category_breakdown.values())


def low_stock(items: Iterable[SupplyItem]) -> list[LowStockItem]:
    out: list[LowStockItem] = []
    for item in items:
        if item.reorder_level is None or item.quantity_on_hand > item.reorder_level:
            continue
        out.append(
            LowStockItem(
                item_id=item.item_id,
                item_name=item.item_name,
                quantity_on_hand=item.quantity_on_hand,
                reorder_level=item.reorder_level,
                status="out_of_stock" if item.quantity_on_hand == 0 else "low_stock",
            )
        )
    return out


def order_trends(orders: Iterable[SupplyOrder]) -> list[SupplyTrend]:
    """Monthly order volume, oldest month first. Cancelled orders are left out."""
    by_month: dict[str, list[SupplyOrder]] = defaultdict(list)
    for order in orders:
        if order.status == "cancelled":
            continue
        by_month[order.order_date[:7]].append(order)

    trends: list[SupplyTrend] = []
    for month in sorted(by_month):
        group = by_month[month]
        total = sum(o.total_cost for o in group)
        trends.append(
            SupplyTrend(
                period=month,
                total_orders=len(group),
                total_cost=money(total),
                average_order_value=money(total / len(group)),
            )
        )
    return trends


def build_supply_analytics(
    items: Iterable[SupplyItem],
    utilizations: Iterable[SupplyUtilization] = (),
    orders: Iterable[SupplyOrder] = (),
    school_id: Optional[str] = None,
    academic_year_id: Optional[str] = None,
) -> SupplyAnalytics:
    items = list(items)
    rates: dict[str, list[float]] = defaultdict(list)
    for u in utilizations:
        rates[u.item_id].append(u.utilization_rate)

    grouped: dict[str, list[SupplyItem]] = defaultdict(list)
    for item in items:
        grouped[item.category].append(item)

    breakdown: dict[str, SupplyCategoryBreakdown] = {}
    for category, group in grouped.items():
        category_rates = [r for item in group for r in rates.get(item.item_id, [])]
        breakdown[category] = SupplyCategoryBreakdown(
            item_count=len(group),
            total_value=money(sum(i.quantity_on_hand * (i.unit_cost or 0) for i in group)),
            average_utilization=round(mean(category_rates), 2),
        )

    analytics = SupplyAnalytics(
        **present(school_id=school_id, academic_year_id=academic_year_id),
        total_items=len(items),
        total_value=money(sum(c.total_value for c in breakdown.values())),
        category_breakdown=breakdown,
        low_stock_items=low_stock(items),
        trends=order_trends(orders),
    )
    log.debug(
        "supply analytics: %d item(s) in %d categories, %d low stock",
        len(items), len(breakdown), len(analytics.low_stock_items),
    )
    return analytics
