# src/emis/rules/__init__.py
"""
Business rules that sit outside the structural schemas.

Every check returns a list of ``Violation`` with kind ``cross_field``; an
empty list means the rule holds. ``run_rules`` applies every rule relevant
to a parsed record.
"""
from __future__ import annotations

from typing import Callable, Optional

from emis.core.config import PrimaryRolePolicy
from emis.schemas.base import EMISModel
from emis.schemas.financial.budget import Budget, BudgetLineItem
from emis.schemas.human_resources.staff import Staff
from emis.schemas.people.staff_analytics import ComprehensiveRatioTrend, PeopleDashboardData
from emis.validation.base import Violation

from .consistency import (
    check_budget_balance,
    check_line_item_balance,
    check_ratio_reciprocity,
    check_version_increment,
)
from .grades import check_grade_range, compare_grades
from .roles import check_primary_roles, find_primary_overlaps, roles_overlap
from .trends import sort_trends, trend_delta


def _staff(record: Staff, policy: Optional[PrimaryRolePolicy]) -> list[Violation]:
    return check_primary_roles(record, policy)


def _budget(record: Budget, policy: Optional[PrimaryRolePolicy]) -> list[Violation]:
    return check_budget_balance(record)


def _line_item(record: BudgetLineItem, policy: Optional[PrimaryRolePolicy]) -> list[Violation]:
    return check_line_item_balance(record)


def _ratio(record: ComprehensiveRatioTrend, policy: Optional[PrimaryRolePolicy]) -> list[Violation]:
    return check_ratio_reciprocity(record)


def _dashboard_ratios(record: PeopleDashboardData, policy: Optional[PrimaryRolePolicy]) -> list[Violation]:
    if not record.comprehensive_ratio_trends:
        return []
    return [
        v.model_copy(update={"path": ("comprehensiveRatioTrends",) + v.path})
        for v in check_ratio_reciprocity(record.comprehensive_ratio_trends)
    ]


RuleFn = Callable[[EMISModel, Optional[PrimaryRolePolicy]], list[Violation]]

_RULES: list[tuple[type[EMISModel], RuleFn]] = [
    (Staff, _staff),
    (Budget, _budget),
    (BudgetLineItem, _line_item),
    (ComprehensiveRatioTrend, _ratio),
    (PeopleDashboardData, _dashboard_ratios),
]


def rules_for(schema: type[EMISModel]) -> list[RuleFn]:
    return [rule for model, rule in _RULES if issubclass(schema, model)]


def run_rules(record: EMISModel, policy: Optional[PrimaryRolePolicy] = None) -> list[Violation]:
    """
    All rule violations for ``record``; records with no rules yield [].

    ``policy`` overrides the configured primary-role policy for this call.
    """
    out: list[Violation] = []
    for rule in rules_for(type(record)):
        out.extend(rule(record, policy))
    return out


__all__ = [
    "check_ratio_reciprocity",
    "check_version_increment",
    "check_primary_roles",
    "find_primary_overlaps",
    "roles_overlap",
    "check_line_item_balance",
    "check_budget_balance",
    "check_grade_range",
    "compare_grades",
    "sort_trends",
    "trend_delta",
    "rules_for",
    "run_rules",
]
