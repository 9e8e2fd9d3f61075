# schemas/data_quality/indicators.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Percentage, UUIDStr

QualityDimension = Literal[
    "completeness",
    "accuracy",
    "consistency",
    "timeliness",
    "validity",
    "reliability",
    "other",
]
QualityStatus = Literal["excellent", "good", "acceptable", "needs_improvement", "critical"]


class DataQualityIndicator(EMISModel):
    indicator_id: UUIDStr
    indicator_name: str = Field(..., min_length=1, max_length=255)
    indicator_type: QualityDimension
    value: Percentage
    target: Optional[Percentage] = None
    status: QualityStatus
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class DataSourceQuality(EMISModel):
    source: str = Field(..., max_length=255)
    quality_score: Percentage
    issues: Optional[list[str]] = None


class QualityScoreTrend(EMISModel):
    period: str
    quality_score: Percentage


class DataQualitySummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_quality_score: Percentage
    indicators: list[DataQualityIndicator]
    data_sources: Optional[list[DataSourceQuality]] = None
    trends: list[QualityScoreTrend]
