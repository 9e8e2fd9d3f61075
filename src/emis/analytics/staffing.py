# src/emis/analytics/staffing.py
"""Staffing aggregates: ratio snapshots and role distribution."""
from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Iterable, Mapping, Optional

from emis.schemas.human_resources.staff import Staff, StaffRole
from emis.schemas.human_resources.staff_roles import RoleDistribution
from emis.schemas.people.staff_analytics import ComprehensiveRatioTrend

from ._util import mean, percent, present


def build_ratio_trend(month: str, students: int, teachers: int, **extra: Any) -> ComprehensiveRatioTrend:
    """
    Ratio snapshot for ``month`` with both directions derived from the counts,
    so the pair is reciprocal by construction.

    ``extra`` passes optional fields through (``averageStudentGrade``,
    ``passRate``, ``status``).
    """
    if students <= 0 or teachers <= 0:
        raise ValueError("A ratio needs at least one student and one teacher")
    return ComprehensiveRatioTrend(
        month=month,
        student_to_teacher_ratio=students / teachers,
        teacher_to_student_ratio=teachers / students,
        student_count=students,
        teacher_count=teachers,
        **extra,
    )


def current_role(staff: Staff) -> Optional[StaffRole]:
    """The open-ended primary role, else the first open-ended role, else the first role."""
    active = [r for r in staff.roles if r.end_date is None] or staff.roles
    for r in active:
        if r.is_primary:
            return r
    return active[0] if active else None


def build_role_distribution(
    staff: Iterable[Staff],
    salaries: Optional[Mapping[str, float]] = None,
    experience: Optional[Mapping[str, float]] = None,
) -> list[RoleDistribution]:
    """
    Head count per role type, each person counted once under ``current_role``.

    ``salaries`` and ``experience`` (keyed by staff id) are optional and feed
    the per-role averages. Largest role first.
    """
    counts: Counter[str] = Counter()
    pay: dict[str, list[float]] = defaultdict(list)
    years: dict[str, list[float]] = defaultdict(list)
    for person in staff:
        role = current_role(person)
        if role is None:
            continue
        counts[role.role_type] += 1
        if salaries and person.staff_id in salaries:
            pay[role.role_type].append(salaries[person.staff_id])
        if experience and person.staff_id in experience:
            years[role.role_type].append(experience[person.staff_id])

    total = sum(counts.values())
    return [
        RoleDistribution(
            role_type=role_type,
            count=count,
            percentage=percent(count, total),
            **present(
                average_experience=round(mean(years[role_type]), 1) if years.get(role_type) else None,
                average_salary=round(mean(pay[role_type]), 2) if pay.get(role_type) else None,
            ),
        )
        for role_type, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
