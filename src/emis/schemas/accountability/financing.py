# schemas/accountability/financing.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, UUIDStr

FinancingType = Literal[
    "tuition", "donation", "grant", "government_funding", "sponsorship", "other",
]
FinancingStatus = Literal["approved", "pending", "disbursed", "cancelled"]


class FinancingRelationship(EMISModel):
    financing_id: UUIDStr
    stakeholder_id: UUIDStr
    provider_id: UUIDStr
    amount: Currency
    financing_type: FinancingType
    period: str = Field(..., min_length=1)
    status: FinancingStatus
    disbursement_date: Optional[ISODate] = None
