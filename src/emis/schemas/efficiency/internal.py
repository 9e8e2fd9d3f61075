# schemas/efficiency/internal.py
# How efficiently the EMIS itself collects, processes and reports data.
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Number, Percentage, UUIDStr

InternalMetricType = Literal[
    "data_collection_time",
    "data_processing_time",
    "report_generation_time",
    "system_uptime",
    "error_rate",
    "data_accuracy",
    "user_satisfaction",
    "other",
]
OperationalStatus = Literal["optimal", "acceptable", "concerning", "critical"]


class InternalEfficiencyMetric(EMISModel):
    metric_id: UUIDStr
    metric_name: str = Field(..., min_length=1, max_length=255)
    metric_type: InternalMetricType
    value: Number
    unit: Optional[str] = Field(None, max_length=50)
    target: Optional[Number] = None
    status: OperationalStatus
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class EfficiencyScoreTrend(EMISModel):
    period: str
    efficiency_score: Percentage


class InternalEfficiencyAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_efficiency_score: Percentage
    metrics: list[InternalEfficiencyMetric]
    trends: list[EfficiencyScoreTrend]
    improvement_areas: list[str]
    strengths: list[str]
