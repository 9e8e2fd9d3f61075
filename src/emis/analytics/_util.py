# src/emis/analytics/_util.py
from __future__ import annotations

from typing import Iterable, Union

Num = Union[int, float]


def money(value: float) -> float:
    return round(value, 2)


def percent(part: float, whole: float, cap: bool = True) -> float:
    """``part`` as a percentage of ``whole``, 2dp. Zero ``whole`` gives 0."""
    if not whole:
        return 0.0
    value = round(part / whole * 100, 2)
    return min(value, 100.0) if cap else value


def mean(values: Iterable[Num]) -> float:
    """Arithmetic mean; an empty input gives 0.0."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def present(**fields: object) -> dict[str, object]:
    """Keyword arguments minus the ``None`` ones; schemas reject explicit nulls."""
    return {k: v for k, v in fields.items() if v is not None}
