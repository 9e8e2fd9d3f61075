# schemas/accountability/informing.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeInt, UUIDStr

InformationType = Literal[
    "performance_report",
    "financial_report",
    "academic_results",
    "policy_update",
    "announcement",
    "other",
]
DisseminationMethod = Literal["publication", "email", "meeting", "website", "newsletter", "other"]


class InformationDissemination(EMISModel):
    dissemination_id: UUIDStr
    provider_id: UUIDStr
    stakeholder_id: Optional[UUIDStr] = None  # absent for public dissemination
    information_type: InformationType
    title: str = Field(..., min_length=1, max_length=255)
    content: Optional[str] = Field(None, max_length=5000)
    dissemination_method: DisseminationMethod
    dissemination_date: ISODate
    access_count: NonNegativeInt = 0
