# Index for efficiency schemas
from __future__ import annotations
__all__ = []
from .internal import InternalEfficiencyMetric, EfficiencyScoreTrend, InternalEfficiencyAnalytics
__all__ += ['InternalEfficiencyMetric','EfficiencyScoreTrend','InternalEfficiencyAnalytics']
from .external import ExternalEfficiencyMetric, ExternalEfficiencyAnalytics
__all__ += ['ExternalEfficiencyMetric','ExternalEfficiencyAnalytics']
from .cost import CostEfficiencyMetric, CostEfficiencyAnalytics
__all__ += ['CostEfficiencyMetric','CostEfficiencyAnalytics']
from .technological import TechnologicalEfficiencyMetric, TechnologicalEfficiencyAnalytics
__all__ += ['TechnologicalEfficiencyMetric','TechnologicalEfficiencyAnalytics']
