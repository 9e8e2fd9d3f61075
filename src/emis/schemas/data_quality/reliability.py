# schemas/data_quality/reliability.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Percentage, UUIDStr


class DataReliabilityMetric(EMISModel):
    metric_id: UUIDStr
    metric_name: str = Field(..., min_length=1, max_length=255)
    reliability_score: Percentage
    consistency_score: Optional[Percentage] = None
    stability_score: Optional[Percentage] = None
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class ReliabilityTrend(EMISModel):
    period: str
    reliability_score: Percentage


class DataReliabilityAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_reliability_score: Percentage
    metrics: list[DataReliabilityMetric]
    data_source_reliability: Optional[dict[str, Percentage]] = None
    trends: list[ReliabilityTrend]
