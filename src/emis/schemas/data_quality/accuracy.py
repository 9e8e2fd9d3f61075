# schemas/data_quality/accuracy.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr


class DataAccuracyRecord(EMISModel):
    """Outcome of one validation pass over a data source."""
    record_id: UUIDStr
    data_source: str = Field(..., max_length=255)
    data_type: str = Field(..., max_length=255)
    total_records: NonNegativeNumber
    accurate_records: NonNegativeNumber
    inaccurate_records: NonNegativeNumber
    accuracy_rate: Percentage
    validation_date: ISODate
    validated_by: Optional[UUIDStr] = None
    issues: Optional[list[str]] = None


class SourceAccuracy(EMISModel):
    accuracy_rate: Percentage
    total_records: NonNegativeNumber


class AccuracyTrend(EMISModel):
    period: str
    accuracy_rate: Percentage


class DataAccuracyAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_accuracy_rate: Percentage
    records: list[DataAccuracyRecord]
    source_breakdown: dict[str, SourceAccuracy]
    trends: list[AccuracyTrend]
