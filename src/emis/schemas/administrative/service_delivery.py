# schemas/administrative/service_delivery.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, Number, Percentage, UUIDStr

ServiceIndicatorType = Literal[
    "instructional_quality",
    "student_support",
    "parent_engagement",
    "community_outreach",
    "resource_utilization",
    "safety_security",
    "technology_access",
    "extracurricular_activities",
    "other",
]
ServiceStatus = Literal["excellent", "good", "acceptable", "needs_improvement", "critical"]
BenchmarkType = Literal[
    "national_average", "state_average", "district_average", "peer_schools", "target",
]
BenchmarkStatus = Literal["above_benchmark", "at_benchmark", "below_benchmark"]


class ServiceDeliveryIndicator(EMISModel):
    indicator_id: UUIDStr
    school_id: Optional[UUIDStr] = None
    indicator_name: str = Field(..., min_length=1, max_length=255)
    indicator_type: ServiceIndicatorType
    value: Number
    unit: Optional[str] = None
    target: Optional[Number] = None
    status: ServiceStatus
    period: str = Field(..., min_length=1)
    measurement_date: ISODate


class ServiceDeliveryCategory(EMISModel):
    category_name: str = Field(..., min_length=1)
    indicators: list[ServiceDeliveryIndicator]
    overall_score: Optional[Percentage] = None
    target_score: Optional[Percentage] = None


class ServiceScoreTrend(EMISModel):
    period: str
    overall_score: Percentage


class ServiceDeliverySummary(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    categories: list[ServiceDeliveryCategory]
    overall_score: Percentage
    target_score: Optional[Percentage] = None
    strengths: list[str]
    areas_for_improvement: list[str]
    trends: list[ServiceScoreTrend]
    last_updated: ISODate


class ServiceDeliveryBenchmark(EMISModel):
    indicator_id: UUIDStr
    current_value: Number
    benchmark_value: Number
    benchmark_type: BenchmarkType
    variance: Number  # difference from the benchmark
    variance_percentage: Number
    status: BenchmarkStatus
