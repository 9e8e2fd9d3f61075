# schemas/accountability/enforcing.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, UUIDStr

EnforcementActionType = Literal[
    "sanction", "penalty", "requirement", "corrective_action", "review", "other",
]
EnforcementStatus = Literal["pending", "in_progress", "completed", "cancelled"]


class EnforcementAction(EMISModel):
    action_id: UUIDStr
    stakeholder_id: UUIDStr
    provider_id: UUIDStr
    action_type: EnforcementActionType
    reason: str = Field(..., min_length=1, max_length=1000)
    action_date: ISODate
    status: EnforcementStatus
    resolution_date: Optional[ISODate] = None
    outcome: Optional[str] = Field(None, max_length=1000)
