# schemas/data_quality/trust.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeInt, NonNegativeNumber, Percentage, UUIDStr


class DataTrustIndicator(EMISModel):
    indicator_id: UUIDStr
    indicator_name: str = Field(..., min_length=1, max_length=255)
    trust_score: Percentage
    usage_count: NonNegativeNumber
    user_satisfaction: Optional[Percentage] = None
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class UserTrust(EMISModel):
    user_id: UUIDStr
    trust_score: Percentage
    usage_frequency: NonNegativeInt


class TrustTrend(EMISModel):
    period: str
    trust_score: Percentage
    usage_count: NonNegativeNumber


class DataTrustAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_trust_score: Percentage
    indicators: list[DataTrustIndicator]
    user_trust: Optional[list[UserTrust]] = None
    trends: list[TrustTrend]
