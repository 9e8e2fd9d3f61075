# src/emis/rules/roles.py
"""
Primary-role overlap.

Whether a staff member may hold two primary roles at the same time is not a
confirmed business rule, so the check is policy-driven:

- ``ignore``: never report (default)
- ``warn``: log and return warnings
- ``error``: raise ``BusinessRuleError``
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from emis.app_logger import get_logger
from emis.core.config import PrimaryRolePolicy, settings
from emis.exceptions import BusinessRuleError
from emis.schemas.human_resources.staff import Staff, StaffRole
from emis.validation.base import ValidationSeverity, Violation, ViolationKind

log = get_logger("rules.roles")

RULE_NAME = "primary_role_overlap"


def _span(role: StaffRole) -> tuple[date, date]:
    end = date.fromisoformat(role.end_date) if role.end_date else date.max
    return date.fromisoformat(role.start_date), end


def roles_overlap(a: StaffRole, b: StaffRole) -> bool:
    """Date ranges are inclusive; a missing end date means still active."""
    a_start, a_end = _span(a)
    b_start, b_end = _span(b)
    return a_start <= b_end and b_start <= a_end


def find_primary_overlaps(staff: Staff) -> list[tuple[int, int]]:
    """Index pairs of primary roles whose active periods overlap."""
    primaries = [(i, r) for i, r in enumerate(staff.roles) if r.is_primary]
    pairs: list[tuple[int, int]] = []
    for n, (i, a) in enumerate(primaries):
        for j, b in primaries[n + 1:]:
            if roles_overlap(a, b):
                pairs.append((i, j))
    return pairs


def check_primary_roles(
    staff: Staff, policy: Optional[PrimaryRolePolicy] = None
) -> list[Violation]:
    policy = policy or settings.PRIMARY_ROLE_POLICY
    if policy == "ignore":
        return []

    severity = ValidationSeverity.WARNING if policy == "warn" else ValidationSeverity.ERROR
    violations = [
        Violation(
            path=("roles", j, "isPrimary"),
            kind=ViolationKind.CROSS_FIELD,
            message=f"Primary role {j} overlaps primary role {i} in the same period",
            input=True,
            severity=severity,
        )
        for i, j in find_primary_overlaps(staff)
    ]
    log.debug("primary roles for %s: %d overlap(s)", staff.staff_id, len(violations))

    if violations and policy == "warn":
        for v in violations:
            log.warning("%s: %s (%s)", staff.staff_id, v.message, v.location)
    elif violations and policy == "error":
        raise BusinessRuleError(RULE_NAME, violations)
    return violations
