# schemas/human_resources/ministry_finance.py
# HR data mirrored from a Ministry of Finance payroll system, where one exists.
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeInt, UUIDStr

SyncStatus = Literal["synced", "pending", "error", "not_applicable"]
SyncRunStatus = Literal["success", "partial", "failed"]


class MinistryFinanceHRRecord(EMISModel):
    record_id: UUIDStr
    staff_id: UUIDStr
    ministry_employee_id: Optional[str] = Field(None, max_length=100)
    payroll_number: Optional[str] = Field(None, max_length=100)
    salary_grade: Optional[str] = Field(None, max_length=50)
    salary_step: Optional[str] = Field(None, max_length=50)
    ministry_base_salary: Optional[Currency] = None
    last_sync_date: Optional[ISODate] = None
    sync_status: SyncStatus
    notes: Optional[str] = Field(None, max_length=1000)


class MinistryFinanceHRSync(EMISModel):
    sync_id: UUIDStr
    sync_date: ISODate
    records_synced: NonNegativeInt
    records_updated: NonNegativeInt
    records_created: NonNegativeInt
    errors: Optional[list[str]] = None
    status: SyncRunStatus
