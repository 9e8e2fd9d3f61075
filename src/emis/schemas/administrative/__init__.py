# Index for administrative schemas
from __future__ import annotations
__all__ = []
from .indicators import (
    EfficiencyMetric, SchoolDevelopmentPlan, TeacherAgeDistribution,
    TeacherQualificationIndicator, AdministrativeIndicatorSummary,
)
__all__ += ['EfficiencyMetric','SchoolDevelopmentPlan','TeacherAgeDistribution',
            'TeacherQualificationIndicator','AdministrativeIndicatorSummary']
from .behavioral import (
    AbsenteeismRecord, LateArrivalRecord, StudentBehavioralAnalytics,
    StaffBehavioralAnalytics, BehavioralSummary,
)
__all__ += ['AbsenteeismRecord','LateArrivalRecord','StudentBehavioralAnalytics',
            'StaffBehavioralAnalytics','BehavioralSummary']
from .enrollment import EnrollmentRate, EnrollmentTrend, EnrollmentAnalytics
__all__ += ['EnrollmentRate','EnrollmentTrend','EnrollmentAnalytics']
from .financial_assistance import (
    FinancialAssistanceProgram, SchoolFeedingProgram, TitleIProgram,
    FinancialAssistanceStudentRecord, FinancialAssistanceSummary,
)
__all__ += ['FinancialAssistanceProgram','SchoolFeedingProgram','TitleIProgram',
            'FinancialAssistanceStudentRecord','FinancialAssistanceSummary']
from .rate import CompletionRate, ProgressionRate, SurvivalRate, RateTrend, RateAnalytics
__all__ += ['CompletionRate','ProgressionRate','SurvivalRate','RateTrend','RateAnalytics']
from .ratio import StudentToTeacherRatio, SchoolToStudentRatio, RatioTrend, RatioAnalytics
__all__ += ['StudentToTeacherRatio','SchoolToStudentRatio','RatioTrend','RatioAnalytics']
from .school_improvement import (
    ImprovementProgram, ImprovementIntervention, ImprovementProgramAnalytics,
)
__all__ += ['ImprovementProgram','ImprovementIntervention','ImprovementProgramAnalytics']
from .service_delivery import (
    ServiceDeliveryIndicator, ServiceDeliveryCategory, ServiceDeliverySummary,
    ServiceDeliveryBenchmark,
)
__all__ += ['ServiceDeliveryIndicator','ServiceDeliveryCategory','ServiceDeliverySummary',
            'ServiceDeliveryBenchmark']
from .special_needs import (
    SpecialNeedsClassification, SpecialNeedsStudentRecord, SpecialNeedsPopulationSummary,
)
__all__ += ['SpecialNeedsClassification','SpecialNeedsStudentRecord','SpecialNeedsPopulationSummary']
