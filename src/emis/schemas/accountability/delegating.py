# schemas/accountability/delegating.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, UUIDStr

DelegationType = Literal["authority", "responsibility", "resources", "decision_making", "other"]
DelegationStatus = Literal["active", "completed", "revoked", "expired"]


class Delegation(EMISModel):
    delegation_id: UUIDStr
    stakeholder_id: UUIDStr  # parent, community, student ...
    provider_id: UUIDStr     # school, teacher, ministry
    delegation_type: DelegationType
    delegated_to: str = Field(..., max_length=255)
    start_date: ISODate
    end_date: Optional[ISODate] = None
    status: DelegationStatus
    description: Optional[str] = Field(None, max_length=1000)
