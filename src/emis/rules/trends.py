# src/emis/rules/trends.py
"""
Helpers for trend arrays.

Trend arrays are not guaranteed to arrive in chronological order, so
anything that compares first and last points sorts explicitly first.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _get(point: Any, name: str) -> Any:
    if isinstance(point, BaseModel):
        if name in type(point).model_fields:
            return getattr(point, name)
        # allow wire names too
        for attr, field in type(point).model_fields.items():
            if field.alias == name:
                return getattr(point, attr)
        raise KeyError(name)
    return point[name]


def sort_trends(trends: Sequence[T], key: str = "period") -> list[T]:
    """New list ordered by ``key`` (``period``/``month`` strings sort chronologically)."""
    return sorted(trends, key=lambda p: _get(p, key))


def trend_delta(trends: Sequence[Any], metric: str, key: str = "period") -> Optional[float]:
    """
    Last minus first value of ``metric`` after sorting by ``key``.

    Returns None for an empty array and 0 for a single point.
    """
    if not trends:
        return None
    ordered = sort_trends(trends, key)
    return _get(ordered[-1], metric) - _get(ordered[0], metric)
