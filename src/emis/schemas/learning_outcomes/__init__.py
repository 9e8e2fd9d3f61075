# Index for learning-outcomes schemas
from __future__ import annotations
__all__ = []
from .grades import GradeValue, GradeType, Grade, GradeSummary, GradeAnalytics
__all__ += ['GradeValue','GradeType','Grade','GradeSummary','GradeAnalytics']
from .classroom_assessment import (
    ClassroomAssessment, ClassroomAssessmentStudentResult, ClassroomAssessmentAnalytics,
)
__all__ += ['ClassroomAssessment','ClassroomAssessmentStudentResult','ClassroomAssessmentAnalytics']
from .national_assessment import NationalAssessment, NationalAssessmentAnalytics
__all__ += ['NationalAssessment','NationalAssessmentAnalytics']
from .performance_analytics import StudentPerformanceTrend, PerformanceAnalytics
__all__ += ['StudentPerformanceTrend','PerformanceAnalytics']
