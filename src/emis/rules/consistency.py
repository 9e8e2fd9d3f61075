# src/emis/rules/consistency.py
"""
Numeric consistency rules that span several fields or several snapshots.

These are deliberately not part of the structural schemas: a record can be
well-formed and still disagree with itself (a ratio and its reciprocal, a
remaining amount that is not allocated minus spent) or with its previous
version.
"""
from __future__ import annotations

from typing import Iterable, Optional, Union

from emis.app_logger import get_logger
from emis.core.config import settings
from emis.schemas.base import AuditFields
from emis.schemas.financial.budget import Budget, BudgetLineItem
from emis.schemas.people.staff_analytics import ComprehensiveRatioTrend
from emis.validation.base import PathItem, Violation, ViolationKind

log = get_logger("rules")

# amounts are stored to the cent
AMOUNT_TOLERANCE = 0.005


def _cross_field(path: tuple[PathItem, ...], message: str, value: object = None) -> Violation:
    return Violation(path=path, kind=ViolationKind.CROSS_FIELD, message=message, input=value)


def check_ratio_reciprocity(
    trend: Union[ComprehensiveRatioTrend, Iterable[ComprehensiveRatioTrend]],
    tolerance: Optional[float] = None,
) -> list[Violation]:
    """
    teacherToStudentRatio * studentToTeacherRatio must be 1 within ``tolerance``.

    Accepts one trend point or a sequence of them; for a sequence the
    violation path starts with the index.
    """
    tol = settings.RATIO_TOLERANCE if tolerance is None else tolerance
    if isinstance(trend, ComprehensiveRatioTrend):
        points: list[tuple[tuple[PathItem, ...], ComprehensiveRatioTrend]] = [((), trend)]
    else:
        points = [((i,), t) for i, t in enumerate(trend)]

    out: list[Violation] = []
    for prefix, t in points:
        product = t.student_to_teacher_ratio * t.teacher_to_student_ratio
        if abs(product - 1) > tol:
            out.append(
                _cross_field(
                    prefix + ("teacherToStudentRatio",),
                    f"teacherToStudentRatio ({t.teacher_to_student_ratio}) is not the reciprocal "
                    f"of studentToTeacherRatio ({t.student_to_teacher_ratio}) for {t.month}",
                    t.teacher_to_student_ratio,
                )
            )
    log.debug("ratio reciprocity: %d point(s), %d violation(s)", len(points), len(out))
    return out


def check_version_increment(previous: AuditFields, current: AuditFields) -> list[Violation]:
    """An accepted update bumps ``version`` by exactly one."""
    expected = previous.version + 1
    if current.version == expected:
        return []
    log.debug("version increment: expected %d, got %d", expected, current.version)
    return [
        _cross_field(
            ("version",),
            f"Version must be {expected} after version {previous.version}, got {current.version}",
            current.version,
        )
    ]


def check_line_item_balance(
    item: BudgetLineItem, path: tuple[PathItem, ...] = ()
) -> list[Violation]:
    expected = item.allocated_amount - item.spent_amount
    if abs(item.remaining_amount - expected) <= AMOUNT_TOLERANCE:
        return []
    return [
        _cross_field(
            path + ("remainingAmount",),
            f"Remaining amount must equal allocated minus spent ({expected:.2f})",
            item.remaining_amount,
        )
    ]


def check_budget_balance(budget: Budget) -> list[Violation]:
    """Check the budget totals and every line item for remaining = allocated - spent."""
    out: list[Violation] = []
    expected = budget.total_allocated - budget.total_spent
    if abs(budget.total_remaining - expected) > AMOUNT_TOLERANCE:
        out.append(
            _cross_field(
                ("totalRemaining",),
                f"Total remaining must equal total allocated minus total spent ({expected:.2f})",
                budget.total_remaining,
            )
        )
    for i, item in enumerate(budget.line_items):
        out.extend(check_line_item_balance(item, ("lineItems", i)))
    log.debug("budget %s balance: %d violation(s)", budget.budget_id, len(out))
    return out
