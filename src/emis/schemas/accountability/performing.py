# schemas/accountability/performing.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Number, Percentage, UUIDStr

PerformanceStatus = Literal["met", "exceeded", "not_met", "pending"]


class PerformanceAccountability(EMISModel):
    accountability_id: UUIDStr
    provider_id: UUIDStr
    stakeholder_id: UUIDStr
    performance_metric: str = Field(..., min_length=1, max_length=255)
    target: Optional[Number] = None
    actual: Optional[Number] = None
    achievement_rate: Optional[Percentage] = None
    period: str = Field(..., min_length=1)
    status: PerformanceStatus
    report_date: ISODate
