# Index for data-quality schemas
from __future__ import annotations
__all__ = []
from .indicators import DataQualityIndicator, DataQualitySummary
__all__ += ['DataQualityIndicator','DataQualitySummary']
from .accuracy import DataAccuracyRecord, DataAccuracyAnalytics
__all__ += ['DataAccuracyRecord','DataAccuracyAnalytics']
from .reliability import DataReliabilityMetric, DataReliabilityAnalytics
__all__ += ['DataReliabilityMetric','DataReliabilityAnalytics']
from .trust import DataTrustIndicator, DataTrustAnalytics
__all__ += ['DataTrustIndicator','DataTrustAnalytics']
