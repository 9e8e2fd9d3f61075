# schemas/school/comprehensive.py
from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from ..administrative.indicators import EfficiencyMetric, SchoolDevelopmentPlan
from ..administrative.ratio import RatioAnalytics
from ..administrative.service_delivery import ServiceDeliverySummary
from ..base import ISODate, NonNegativeInt, ProfileMixin, Url, UUIDStr
from ..financial.financial_analytics import FinancialAnalytics
from .school import AccreditationInfo, SchoolProfileSummary


class ComprehensiveSchoolProfile(ProfileMixin, SchoolProfileSummary):
    core_model: ClassVar[type[SchoolProfileSummary]] = SchoolProfileSummary

    # administration
    principal_user_id: Optional[UUIDStr] = None
    vice_principal_user_ids: Optional[list[UUIDStr]] = None
    administrative_staff_count: Optional[NonNegativeInt] = None
    accreditation_info: Optional[AccreditationInfo] = None
    # metadata
    founded_date: Optional[ISODate] = None
    description: Optional[str] = Field(None, max_length=1000)
    motto: Optional[str] = Field(None, max_length=255)
    logo_url: Optional[Url] = None
    # indicators
    efficiency_metrics: Optional[list[EfficiencyMetric]] = None
    development_plans: Optional[list[SchoolDevelopmentPlan]] = None
    service_delivery: Optional[ServiceDeliverySummary] = None
    financial_analytics: Optional[FinancialAnalytics] = None
    ratio_analytics: Optional[RatioAnalytics] = None
