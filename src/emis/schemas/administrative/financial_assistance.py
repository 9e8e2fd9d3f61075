# schemas/administrative/financial_assistance.py
# Feeding programs, Title I and other support for disadvantaged students.
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeNumber, UUIDStr, integer

AssistanceProgramType = Literal[
    "school_feeding",
    "title_i",
    "free_reduced_lunch",
    "textbook_assistance",
    "uniform_assistance",
    "transportation_assistance",
    "scholarship",
    "grant",
    "other",
]
AssistanceProgramStatus = Literal["active", "completed", "cancelled", "planned"]
ClosedProgramStatus = Literal["active", "completed", "cancelled"]
TitleITargetPopulation = Literal[
    "economically_disadvantaged",
    "low_achieving",
    "at_risk",
    "all_students",
]
EligibilityStatus = Literal["eligible", "approved", "denied", "pending"]

MealsPerDay = integer(ge=1, le=5)


class FinancialAssistanceProgram(EMISModel):
    program_id: UUIDStr
    program_name: str = Field(..., min_length=1, max_length=255)
    program_type: AssistanceProgramType
    school_id: Optional[UUIDStr] = None
    academic_year_id: UUIDStr
    start_date: ISODate
    end_date: Optional[ISODate] = None
    total_budget: Currency
    students_served: NonNegativeNumber
    eligibility_criteria: Optional[str] = Field(None, max_length=1000)
    status: AssistanceProgramStatus


class SchoolFeedingProgram(EMISModel):
    program_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    program_name: str = Field(..., min_length=1)
    meals_per_day: MealsPerDay
    students_served: NonNegativeNumber
    daily_meals_served: NonNegativeNumber
    cost_per_meal: Optional[Currency] = None
    total_budget: Currency
    funding_source: Optional[str] = Field(None, max_length=255)
    start_date: ISODate
    end_date: Optional[ISODate] = None
    status: ClosedProgramStatus


class TitleIProgram(EMISModel):
    """US Title I allocation for a school."""
    program_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    allocation: Currency
    students_served: NonNegativeNumber
    target_population: TitleITargetPopulation
    services: list[str]
    start_date: ISODate
    end_date: Optional[ISODate] = None
    status: ClosedProgramStatus


class BenefitReceived(EMISModel):
    date: ISODate
    benefit_type: str
    value: Optional[Currency] = None


class FinancialAssistanceStudentRecord(EMISModel):
    student_id: UUIDStr
    program_id: UUIDStr
    eligibility_status: EligibilityStatus
    enrollment_date: ISODate
    exit_date: Optional[ISODate] = None
    benefits_received: Optional[list[BenefitReceived]] = None


class AssistanceProgramBreakdown(EMISModel):
    program_type: str
    count: NonNegativeNumber
    total_budget: Currency
    students_served: NonNegativeNumber


class AssistanceTrend(EMISModel):
    period: str
    total_budget: Currency
    students_served: NonNegativeNumber


class FinancialAssistanceSummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_programs: NonNegativeNumber
    total_budget: Currency
    total_students_served: NonNegativeNumber
    program_breakdown: list[AssistanceProgramBreakdown]
    trends: list[AssistanceTrend]
