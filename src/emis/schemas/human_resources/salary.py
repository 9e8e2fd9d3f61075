# schemas/human_resources/salary.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeInt, Percentage, UUIDStr

SalaryStructureStatus = Literal["active", "inactive", "archived"]
PayComponentFrequency = Literal["monthly", "quarterly", "annual", "one_time"]
PaymentFrequency = Literal["monthly", "biweekly", "weekly", "annual"]
SalaryRecordStatus = Literal["active", "suspended", "terminated"]


class SalaryScaleLevel(EMISModel):
    level: str
    min_salary: Currency
    max_salary: Currency
    increment: Optional[Currency] = None


class SalaryStructure(EMISModel):
    structure_id: UUIDStr
    school_id: Optional[UUIDStr] = None
    role_type: str = Field(..., max_length=100)
    base_salary: Currency
    salary_scale: Optional[list[SalaryScaleLevel]] = None
    effective_date: ISODate
    expiry_date: Optional[ISODate] = None
    status: SalaryStructureStatus


class Allowance(EMISModel):
    allowance_type: str = Field(..., max_length=100)
    amount: Currency
    frequency: PayComponentFrequency


class Deduction(EMISModel):
    deduction_type: str = Field(..., max_length=100)
    amount: Currency
    frequency: PayComponentFrequency


class StaffSalaryRecord(EMISModel):
    """Pay for one staff member in one academic year."""
    salary_id: UUIDStr
    staff_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    base_salary: Currency
    allowances: list[Allowance]
    deductions: Optional[list[Deduction]] = None
    gross_salary: Currency
    net_salary: Currency
    effective_date: ISODate
    end_date: Optional[ISODate] = None
    payment_frequency: PaymentFrequency
    status: SalaryRecordStatus


class RoleSalaryBreakdown(EMISModel):
    count: NonNegativeInt
    total_salary: Currency
    average_salary: Currency
    min_salary: Currency
    max_salary: Currency


class SalaryBand(EMISModel):
    range: str  # e.g. "$30k-$40k"
    count: NonNegativeInt
    percentage: Percentage


class SalaryTrend(EMISModel):
    period: str
    total_expenditure: Currency
    average_salary: Currency
    staff_count: NonNegativeInt


class SalaryAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_salary_expenditure: Currency
    average_salary: Currency
    median_salary: Optional[Currency] = None
    salary_by_role: dict[str, RoleSalaryBreakdown]
    salary_distribution: list[SalaryBand]
    trends: list[SalaryTrend]
