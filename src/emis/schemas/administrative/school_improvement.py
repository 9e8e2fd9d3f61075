# schemas/administrative/school_improvement.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import Currency, EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr
from ..human_resources.capacity_building import Effectiveness

ImprovementProgramType = Literal[
    "academic_intervention",
    "behavioral_intervention",
    "infrastructure_improvement",
    "teacher_development",
    "curriculum_enhancement",
    "technology_upgrade",
    "community_engagement",
    "other",
]
ImprovementStatus = Literal["planned", "active", "completed", "cancelled", "on_hold"]
OutcomeStatus = Literal["not_met", "partially_met", "met", "exceeded"]
InterventionTarget = Literal[
    "all_students",
    "at_risk_students",
    "specific_grade",
    "specific_subject",
    "teachers",
    "staff",
    "parents",
    "community",
]


class ProgramOutcome(EMISModel):
    outcome_id: UUIDStr
    description: str = Field(..., min_length=1)
    target: Optional[str] = None
    actual: Optional[str] = None
    status: Optional[OutcomeStatus] = None


class ImprovementProgram(EMISModel):
    program_id: UUIDStr
    school_id: UUIDStr
    academic_year_id: UUIDStr
    program_name: str = Field(..., min_length=1, max_length=255)
    program_type: ImprovementProgramType
    focus_area: Optional[str] = Field(None, max_length=500)
    objectives: list[str]
    start_date: ISODate
    end_date: Optional[ISODate] = None
    budget: Optional[Currency] = None
    funding_source: Optional[str] = Field(None, max_length=255)
    status: ImprovementStatus
    progress: Optional[Percentage] = None
    outcomes: Optional[list[ProgramOutcome]] = None


class ImprovementIntervention(EMISModel):
    intervention_id: UUIDStr
    program_id: UUIDStr
    intervention_name: str = Field(..., min_length=1)
    target_population: InterventionTarget
    intervention_type: str = Field(..., max_length=255)
    start_date: ISODate
    end_date: Optional[ISODate] = None
    participants: Optional[NonNegativeNumber] = None
    effectiveness: Optional[Effectiveness] = None
    notes: Optional[str] = Field(None, max_length=2000)


class ProgramTypeSuccess(EMISModel):
    count: NonNegativeNumber
    success_rate: Optional[Percentage] = None


class ImprovementTrend(EMISModel):
    period: str
    total_programs: NonNegativeNumber
    active_programs: NonNegativeNumber
    total_budget: Currency


class ImprovementProgramAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_programs: NonNegativeNumber
    active_programs: NonNegativeNumber
    completed_programs: NonNegativeNumber
    total_budget: Currency
    average_program_duration: Optional[NonNegativeNumber] = None  # days
    success_rate: Optional[Percentage] = None  # programs meeting their objectives
    program_type_breakdown: dict[str, ProgramTypeSuccess]
    trends: list[ImprovementTrend]
