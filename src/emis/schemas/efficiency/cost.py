# schemas/efficiency/cost.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr

CostEfficiencyStatus = Literal[
    "highly_efficient", "efficient", "moderately_efficient", "inefficient",
]


class CostEfficiencyMetric(EMISModel):
    metric_id: UUIDStr
    metric_name: str = Field(..., min_length=1, max_length=255)
    cost: Currency
    output: NonNegativeNumber            # students served, reports produced ...
    efficiency_ratio: NonNegativeNumber  # cost per unit of output
    benchmark: Optional[NonNegativeNumber] = None
    status: CostEfficiencyStatus
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class CostTrend(EMISModel):
    period: str
    total_cost: Currency
    efficiency_ratio: NonNegativeNumber


class CostShare(EMISModel):
    cost: Currency
    percentage: Percentage


class CostEfficiencyAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    total_cost: Currency
    total_output: NonNegativeNumber
    overall_efficiency_ratio: NonNegativeNumber
    metrics: list[CostEfficiencyMetric]
    trends: list[CostTrend]
    cost_breakdown: dict[str, CostShare]
