# schemas/human_resources/staff_roles.py
from __future__ import annotations

from typing import Literal, Optional

from ..base import EMISModel, ISODate, NonNegativeNumber, Percentage, UUIDStr
from .staff import StaffRoleType

VacancyPriority = Literal["low", "medium", "high", "critical"]


class RoleAssignment(EMISModel):
    """Assignment of a staff member to a role, including the reporting line."""
    assignment_id: UUIDStr
    staff_id: UUIDStr
    role_type: StaffRoleType
    school_id: UUIDStr
    department_id: Optional[UUIDStr] = None
    start_date: ISODate
    end_date: Optional[ISODate] = None
    is_primary: bool = False
    responsibilities: Optional[list[str]] = None
    reporting_to: Optional[UUIDStr] = None             # supervisor's staff id
    direct_reports: Optional[list[UUIDStr]] = None


class RoleDistribution(EMISModel):
    role_type: StaffRoleType
    count: NonNegativeNumber
    percentage: Percentage
    average_experience: Optional[NonNegativeNumber] = None
    average_salary: Optional[NonNegativeNumber] = None


class RoleTrend(EMISModel):
    period: str
    role_type: StaffRoleType
    count: NonNegativeNumber


class RoleVacancy(EMISModel):
    role_type: StaffRoleType
    department_id: Optional[UUIDStr] = None
    count: NonNegativeNumber
    priority: Optional[VacancyPriority] = None


class RoleAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    total_staff: NonNegativeNumber
    role_distribution: list[RoleDistribution]
    department_breakdown: dict[str, list[RoleDistribution]]
    trends: list[RoleTrend]
    vacancies: Optional[list[RoleVacancy]] = None
