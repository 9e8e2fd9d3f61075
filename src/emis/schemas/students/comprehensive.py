# schemas/students/comprehensive.py
from __future__ import annotations

from typing import ClassVar, Optional

from ..administrative.behavioral import StudentBehavioralAnalytics
from ..administrative.special_needs import SpecialNeedsStudentRecord
from ..base import ProfileMixin
from ..learning_outcomes.grades import GradeSummary
from .student import (
    StudentClass,
    StudentContact,
    StudentMedical,
    StudentPerformanceData,
    StudentProfileSummary,
)


class ComprehensiveStudentProfile(ProfileMixin, StudentProfileSummary):
    """Everything a student profile page needs in one payload."""

    core_model: ClassVar[type[StudentProfileSummary]] = StudentProfileSummary

    # performance
    performance_data: Optional[list[StudentPerformanceData]] = None
    # contacts
    contacts: Optional[list[StudentContact]] = None
    # academics
    classes: Optional[list[StudentClass]] = None
    extracurriculars: Optional[list[str]] = None
    awards: Optional[list[str]] = None
    # medical
    medical: Optional[StudentMedical] = None
    # attendance and behaviour
    behavioral_analytics: Optional[StudentBehavioralAnalytics] = None
    special_needs: Optional[SpecialNeedsStudentRecord] = None
    grade_summary: Optional[list[GradeSummary]] = None
