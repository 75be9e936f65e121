"""Reducers over query results used by the dashboard and report."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus


def department_breakdown(departments: Iterable[str]) -> dict[str, int]:
    # Counter keeps first-seen order, which is the order the rows came in
    return dict(Counter(departments))


def count_present(statuses: Iterable[AttendanceStatus]) -> int:
    return sum(1 for s in statuses if s == AttendanceStatus.PRESENT)


def attendance_rate(statuses: Iterable[AttendanceStatus]) -> str:
    """Percentage of ``present`` records, one decimal; ``"0"`` when empty."""
    items = list(statuses)
    if not items:
        return "0"
    return f"{count_present(items) / len(items) * 100:.1f}"


def average_rating(ratings: Iterable[Optional[int]]) -> str:
    """Mean rating, one decimal; unrated reviews count as 0, ``"N/A"`` when empty."""
    items = list(ratings)
    if not items:
        return "N/A"
    return f"{sum(r or 0 for r in items) / len(items):.1f}"
