# src/emis/analytics/salary.py
from __future__ import annotations

import statistics
from collections import defaultdict
from typing import Callable, Iterable, Mapping, Optional, Union

from emis.app_logger import get_logger
from emis.schemas.human_resources.salary import (
    RoleSalaryBreakdown,
    SalaryAnalytics,
    SalaryBand,
    SalaryTrend,
    StaffSalaryRecord,
)

from ._util import money, percent, present

log = get_logger("analytics.salary")

BAND_WIDTH = 10_000

RoleLookup = Union[Mapping[str, str], Callable[[str], str]]


def salary_band(amount: float, width: int = BAND_WIDTH) -> str:
    """Label for the band holding ``amount``, e.g. ``"$30k-$40k"``."""
    lo = int(amount // width) * width
    return f"${lo // 1000}k-${(lo + width) // 1000}k"


def _role_getter(role_of: RoleLookup) -> Callable[[str], str]:
    if callable(role_of):
        return role_of
    return lambda staff_id: role_of.get(staff_id, "other")


def build_salary_analytics(
    records: Iterable[StaffSalaryRecord],
    role_of: RoleLookup,
    school_id: Optional[str] = None,
    academic_year_id: Optional[str] = None,
) -> SalaryAnalytics:
    """
    Salary expenditure, per-role breakdown, banding and yearly trend.

    ``role_of`` maps a staff id to its role type (a dict or a function).
    Figures use gross salary; terminated records are excluded.
    """
    records = [r for r in records if r.status != "terminated"]
    role = _role_getter(role_of)
    amounts = [r.gross_salary for r in records]

    by_role: dict[str, list[float]] = defaultdict(list)
    by_band: dict[str, int] = defaultdict(int)
    by_year: dict[str, list[StaffSalaryRecord]] = defaultdict(list)
    for r in records:
        by_role[role(r.staff_id)].append(r.gross_salary)
        by_band[salary_band(r.gross_salary)] += 1
        by_year[r.effective_date[:4]].append(r)

    salary_by_role = {
        name: RoleSalaryBreakdown(
            count=len(values),
            total_salary=money(sum(values)),
            average_salary=money(statistics.fmean(values)),
            min_salary=min(values),
            max_salary=max(values),
        )
        for name, values in sorted(by_role.items())
    }
    bands = [
        SalaryBand(range=label, count=count, percentage=percent(count, len(records)))
        for label, count in sorted(by_band.items(), key=lambda kv: int(kv[0][1:].split("k")[0]))
    ]
    trends = [
        SalaryTrend(
            period=year,
            total_expenditure=money(sum(r.gross_salary for r in group)),
            average_salary=money(statistics.fmean(r.gross_salary for r in group)),
            staff_count=len({r.staff_id for r in group}),
        )
        for year, group in sorted(by_year.items())
    ]

    analytics = SalaryAnalytics(
        **present(school_id=school_id, academic_year_id=academic_year_id),
        total_salary_expenditure=money(sum(amounts)),
        average_salary=money(statistics.fmean(amounts)) if amounts else 0,
        **present(median_salary=money(statistics.median(amounts)) if amounts else None),
        salary_by_role=salary_by_role,
        salary_distribution=bands,
        trends=trends,
    )
    log.debug("salary analytics: %d record(s), %d role(s)", len(records), len(salary_by_role))
    return analytics
