# schemas/human_resources/conditional_cash_transfer.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeInt, UUIDStr

TransferType = Literal[
    "performance_bonus",
    "attendance_bonus",
    "retention_bonus",
    "recruitment_bonus",
    "professional_development",
    "other",
]
ConditionStatus = Literal["met", "not_met", "pending"]
TransferStatus = Literal["pending", "approved", "paid", "denied", "cancelled"]


class TransferCondition(EMISModel):
    condition: str = Field(..., min_length=1)
    status: ConditionStatus
    verification_date: Optional[ISODate] = None


class ConditionalCashTransfer(EMISModel):
    """Performance-linked payment to a staff member, released once its conditions are met."""
    transfer_id: UUIDStr
    staff_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    program_name: str = Field(..., min_length=1, max_length=255)
    transfer_type: TransferType
    amount: Currency
    conditions: list[TransferCondition]
    payment_date: Optional[ISODate] = None
    status: TransferStatus
    approved_by: Optional[UUIDStr] = None
    approved_date: Optional[ISODate] = None
    notes: Optional[str] = Field(None, max_length=1000)


class TransferTypeBreakdown(EMISModel):
    count: NonNegativeInt
    total_amount: Currency
    average_amount: Currency


class TransferParticipation(EMISModel):
    staff_id: UUIDStr
    total_received: Currency
    transfer_count: NonNegativeInt


class TransferTrend(EMISModel):
    period: str
    total_transfers: Currency
    transfer_count: NonNegativeInt
    average_amount: Currency


class ConditionalCashTransferAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_transfers: Currency
    total_paid: Currency
    total_pending: Currency
    total_denied: Currency
    transfer_count: NonNegativeInt
    average_transfer_amount: Currency
    type_breakdown: dict[str, TransferTypeBreakdown]
    staff_participation: list[TransferParticipation]
    trends: list[TransferTrend]
