# schemas/human_resources/capacity_building.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import (
    EMISModel,
    ISODate,
    NonNegativeNumber,
    Percentage,
    Score,
    UUIDStr,
    YearsOfService,
)

CapacityProgramType = Literal[
    "technical_skills",
    "pedagogical_skills",
    "leadership",
    "data_management",
    "emis_training",
    "technology",
    "other",
]
TargetAudience = Literal[
    "all_staff",
    "teachers",
    "administrators",
    "support_staff",
    "data_staff",
    "specific_department",
]
ProgramStatus = Literal["planned", "active", "completed", "cancelled"]
Effectiveness = Literal[
    "highly_effective", "effective", "moderately_effective", "ineffective", "unknown",
]
RetentionStrategyType = Literal[
    "compensation",
    "professional_development",
    "work_environment",
    "recognition",
    "career_advancement",
    "work_life_balance",
    "other",
]
DepartureReason = Literal[
    "resignation",
    "retirement",
    "termination",
    "transfer",
    "end_of_contract",
    "other",
]


class CapacityBuildingProgram(EMISModel):
    program_id: UUIDStr
    school_id: Optional[UUIDStr] = None
    program_name: str = Field(..., min_length=1, max_length=255)
    program_type: CapacityProgramType
    target_audience: TargetAudience
    start_date: ISODate
    end_date: Optional[ISODate] = None
    participants: list[UUIDStr]
    objectives: list[str]
    status: ProgramStatus
    effectiveness: Optional[Effectiveness] = None


class RetentionStrategy(EMISModel):
    strategy_id: UUIDStr
    school_id: UUIDStr
    strategy_name: str = Field(..., min_length=1, max_length=255)
    strategy_type: RetentionStrategyType
    start_date: ISODate
    end_date: Optional[ISODate] = None
    target_staff: Optional[list[UUIDStr]] = None
    status: ProgramStatus
    effectiveness: Optional[Effectiveness] = None


class TurnoverRecord(EMISModel):
    """One departure; feeds turnover and retention rates."""
    record_id: UUIDStr
    staff_id: UUIDStr
    school_id: UUIDStr
    departure_date: ISODate
    departure_reason: DepartureReason
    years_of_service: YearsOfService
    replacement_hired: bool = False
    replacement_date: Optional[ISODate] = None
    replacement_staff_id: Optional[UUIDStr] = None
    exit_interview_conducted: bool = False
    feedback: Optional[str] = Field(None, max_length=2000)


class ProgramEffectivenessBreakdown(EMISModel):
    count: NonNegativeNumber
    effectiveness_distribution: dict[str, NonNegativeNumber]


class StaffCapacityLevel(EMISModel):
    staff_id: UUIDStr
    capacity_score: Score
    skills_gained: list[str]
    certifications_earned: NonNegativeNumber


class CapacityBuildingTrend(EMISModel):
    period: str
    total_programs: NonNegativeNumber
    total_participants: NonNegativeNumber
    average_effectiveness: Optional[Score] = None


class CapacityBuildingAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_programs: NonNegativeNumber
    active_programs: NonNegativeNumber
    total_participants: NonNegativeNumber
    average_participation_rate: Percentage
    program_effectiveness: dict[str, ProgramEffectivenessBreakdown]
    staff_capacity_levels: list[StaffCapacityLevel]
    trends: list[CapacityBuildingTrend]


class RoleTurnover(EMISModel):
    count: NonNegativeNumber
    turnover_rate: Percentage
    average_tenure: NonNegativeNumber


class ReasonTurnover(EMISModel):
    count: NonNegativeNumber
    percentage: Percentage


class StrategyEffectiveness(EMISModel):
    strategy_id: UUIDStr
    effectiveness: Optional[Effectiveness] = None


class RetentionTrend(EMISModel):
    period: str
    retention_rate: Percentage
    turnover_rate: Percentage
    average_tenure: NonNegativeNumber


class RetentionAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    current_retention_rate: Percentage
    average_retention_rate: Percentage
    turnover_rate: Percentage
    average_tenure: NonNegativeNumber  # years
    turnover_by_role: dict[str, RoleTurnover]
    turnover_by_reason: dict[str, ReasonTurnover]
    retention_strategies: list[StrategyEffectiveness]
    trends: list[RetentionTrend]
