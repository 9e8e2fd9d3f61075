# src/emis/rules/grades.py
from __future__ import annotations

from emis.schemas.base import grade_ordinal
from emis.schemas.school.school import GRADE_RANGE_MESSAGE
from emis.validation.base import Violation, ViolationKind


def compare_grades(a: str, b: str) -> int:
    """-1, 0 or 1 by K-12 position. ``"10"`` is above ``"2"``."""
    oa, ob = grade_ordinal(a), grade_ordinal(b)
    return (oa > ob) - (oa < ob)


def check_grade_range(lowest: str, highest: str) -> list[Violation]:
    """Same ordering rule ``GradeRange`` enforces, for callers holding bare grade tokens."""
    out: list[Violation] = []
    for key, grade in (("lowestGrade", lowest), ("highestGrade", highest)):
        try:
            grade_ordinal(grade)
        except ValueError as exc:
            out.append(Violation(path=(key,), kind=ViolationKind.INVALID_CHOICE, message=str(exc), input=grade))
    if out:
        return out
    if compare_grades(highest, lowest) < 0:
        out.append(
            Violation(path=("highestGrade",), kind=ViolationKind.CROSS_FIELD, message=GRADE_RANGE_MESSAGE, input=highest)
        )
    return out
