# schemas/efficiency/technological.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Number, Percentage, UUIDStr
from .internal import EfficiencyScoreTrend, OperationalStatus

TechnologicalMetricType = Literal[
    "system_performance",
    "data_processing_speed",
    "automation_rate",
    "integration_efficiency",
    "user_adoption",
    "technology_utilization",
    "other",
]
TechnologyEfficiency = Literal["high", "medium", "low"]


class TechnologicalEfficiencyMetric(EMISModel):
    metric_id: UUIDStr
    metric_name: str = Field(..., min_length=1, max_length=255)
    metric_type: TechnologicalMetricType
    value: Number
    unit: Optional[str] = Field(None, max_length=50)
    target: Optional[Number] = None
    status: OperationalStatus
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class TechnologyUsage(EMISModel):
    technology: str = Field(..., max_length=255)
    utilization_rate: Percentage
    efficiency: TechnologyEfficiency


class TechnologicalEfficiencyAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_efficiency_score: Percentage
    metrics: list[TechnologicalEfficiencyMetric]
    technology_stack: Optional[list[TechnologyUsage]] = None
    trends: list[EfficiencyScoreTrend]
