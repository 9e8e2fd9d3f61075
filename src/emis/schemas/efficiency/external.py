# schemas/efficiency/external.py
# The EMIS's effect on the wider system: resource use, cost per outcome, decision support.
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Number, Percentage, UUIDStr
from .internal import EfficiencyScoreTrend

ExternalMetricType = Literal[
    "resource_utilization",
    "cost_per_student",
    "cost_per_outcome",
    "system_impact",
    "decision_support",
    "stakeholder_satisfaction",
    "other",
]
BenchmarkPosition = Literal["above_benchmark", "at_benchmark", "below_benchmark"]


class ExternalEfficiencyMetric(EMISModel):
    metric_id: UUIDStr
    metric_name: str = Field(..., min_length=1, max_length=255)
    metric_type: ExternalMetricType
    value: Number
    unit: Optional[str] = Field(None, max_length=50)
    benchmark: Optional[Number] = None
    status: BenchmarkPosition
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class BenchmarkComparison(EMISModel):
    current: Number
    benchmark: Number
    variance: Number


class ExternalEfficiencyAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_efficiency_score: Percentage
    metrics: list[ExternalEfficiencyMetric]
    trends: list[EfficiencyScoreTrend]
    benchmark_comparison: Optional[dict[str, BenchmarkComparison]] = None
