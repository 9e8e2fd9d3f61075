# schemas/financial/fees.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr

FeeType = Literal[
    "tuition",
    "registration",
    "activity",
    "technology",
    "textbook",
    "uniform",
    "transportation",
    "meal",
    "library",
    "laboratory",
    "other",
]
FeeFrequency = Literal["one_time", "annual", "semester", "quarterly", "monthly", "per_term"]
FeeStatus = Literal["active", "inactive", "cancelled"]
PaymentMethod = Literal[
    "cash",
    "check",
    "credit_card",
    "debit_card",
    "bank_transfer",
    "online_payment",
    "scholarship",
    "waiver",
    "other",
]
PaymentStatus = Literal["pending", "completed", "failed", "refunded", "cancelled"]
WaiverType = Literal["full_waiver", "partial_waiver", "scholarship", "financial_aid", "other"]
WaiverStatus = Literal["pending", "approved", "denied", "expired"]


class FeeStructure(EMISModel):
    fee_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    fee_name: str = Field(..., min_length=1, max_length=255)
    fee_type: FeeType
    amount: Currency
    grade_level: Optional[str] = None  # set when the fee applies to one grade
    payment_frequency: FeeFrequency
    due_date: Optional[ISODate] = None
    is_mandatory: bool = True
    is_refundable: bool = False
    status: FeeStatus


class FeePayment(EMISModel):
    payment_id: UUIDStr
    student_id: UUIDStr
    fee_id: UUIDStr
    amount: Currency
    payment_date: ISODate
    payment_method: PaymentMethod
    transaction_reference: Optional[str] = Field(None, max_length=100)
    status: PaymentStatus
    notes: Optional[str] = Field(None, max_length=500)
    recorded_by: UUIDStr


class FeeWaiver(EMISModel):
    waiver_id: UUIDStr
    student_id: UUIDStr
    fee_id: UUIDStr
    waiver_type: WaiverType
    waived_amount: Currency
    reason: Optional[str] = Field(None, max_length=500)
    approved_by: UUIDStr
    approved_date: ISODate
    status: WaiverStatus
    expiry_date: Optional[ISODate] = None


class FeeTypeCollection(EMISModel):
    total_due: Currency
    total_collected: Currency
    total_outstanding: Currency
    collection_rate: Percentage


class FeeCollectionTrend(EMISModel):
    period: str
    total_due: Currency
    total_collected: Currency
    collection_rate: Percentage


class FeeCollectionAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_fees_due: Currency
    total_fees_collected: Currency
    total_fees_outstanding: Currency
    collection_rate: Percentage
    total_waivers: Currency
    total_payments: NonNegativeNumber
    average_payment_amount: Currency
    fee_type_breakdown: dict[str, FeeTypeCollection]
    trends: list[FeeCollectionTrend]
