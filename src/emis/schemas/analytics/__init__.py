# Index for cross-cutting analytics schemas
from __future__ import annotations
__all__ = []
from .tsdl import TSDLStudentPerformanceTrend, StrugglingStudent, ExcellingStudent, TSDLAnalytics
__all__ += ['TSDLStudentPerformanceTrend','StrugglingStudent','ExcellingStudent','TSDLAnalytics']
from .dashboard_data import DashboardData
__all__ += ['DashboardData']
