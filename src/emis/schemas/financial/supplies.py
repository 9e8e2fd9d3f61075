# schemas/financial/supplies.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    Currency,
    EMISModel,
    ISODate,
    NonNegativeNumber,
    Percentage,
    UUIDStr,
)

SupplyCategory = Literal[
    "textbooks",
    "teaching_materials",
    "desks",
    "chairs",
    "paper",
    "writing_instruments",
    "technology_equipment",
    "laboratory_equipment",
    "library_books",
    "sports_equipment",
    "art_supplies",
    "music_equipment",
    "other",
]
SupplyItemStatus = Literal["available", "low_stock", "out_of_stock", "ordered", "discontinued"]
SupplyOrderStatus = Literal["pending", "ordered", "in_transit", "received", "cancelled"]
LowStockStatus = Literal["low_stock", "out_of_stock"]


class SupplyItem(EMISModel):
    item_id: UUIDStr
    school_id: UUIDStr
    item_name: str = Field(..., min_length=1, max_length=255)
    category: SupplyCategory
    description: Optional[str] = Field(None, max_length=1000)
    unit: Optional[str] = Field(None, max_length=50)  # "each", "box", "set"
    unit_cost: Optional[Currency] = None
    quantity_on_hand: NonNegativeNumber = 0
    quantity_required: Optional[NonNegativeNumber] = None
    quantity_ordered: NonNegativeNumber = 0
    reorder_level: Optional[NonNegativeNumber] = None
    supplier: Optional[str] = Field(None, max_length=255)
    last_order_date: Optional[ISODate] = None
    last_received_date: Optional[ISODate] = None
    status: SupplyItemStatus


class SupplyOrderLine(EMISModel):
    item_id: UUIDStr
    item_name: str
    quantity: NonNegativeNumber
    unit_cost: Currency
    total_cost: Currency


class SupplyOrder(EMISModel):
    order_id: UUIDStr
    school_id: UUIDStr
    order_date: ISODate
    expected_delivery_date: Optional[ISODate] = None
    actual_delivery_date: Optional[ISODate] = None
    items: list[SupplyOrderLine]
    total_cost: Currency
    supplier: str = Field(..., max_length=255)
    order_number: Optional[str] = Field(None, max_length=100)
    status: SupplyOrderStatus
    received_by: Optional[UUIDStr] = None
    notes: Optional[str] = Field(None, max_length=1000)


class DistributionShare(EMISModel):
    quantity: NonNegativeNumber
    percentage: Percentage


class SupplyUtilization(EMISModel):
    item_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    total_available: NonNegativeNumber
    total_used: NonNegativeNumber
    total_distributed: NonNegativeNumber
    utilization_rate: Percentage
    # keyed by grade level, department or classroom
    distribution_breakdown: Optional[dict[str, DistributionShare]] = None


class SupplyCategoryBreakdown(EMISModel):
    item_count: NonNegativeNumber
    total_value: Currency
    average_utilization: Percentage


class LowStockItem(EMISModel):
    item_id: UUIDStr
    item_name: str
    quantity_on_hand: NonNegativeNumber
    reorder_level: NonNegativeNumber
    status: LowStockStatus


class SupplyTrend(EMISModel):
    period: str
    total_orders: NonNegativeNumber
    total_cost: Currency
    average_order_value: Currency


class SupplyAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_items: NonNegativeNumber
    total_value: Currency
    category_breakdown: dict[str, SupplyCategoryBreakdown]
    low_stock_items: list[LowStockItem]
    trends: list[SupplyTrend]
