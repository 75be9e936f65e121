from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ReviewRow:
    """Read-model: review joined with employee, profile and reviewer name."""

    review_id: int
    employee_id: int
    employee_number: str
    full_name: str
    department: str
    position: str
    review_date: date
    rating: Optional[int]
    comments: Optional[str] = None
    reviewer_name: Optional[str] = None
