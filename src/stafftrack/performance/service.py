from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import fmt_date
from ..core.constants import MAX_RATING
from .repository import PerformanceRepository


def rating_stars(rating: Optional[int]) -> str:
    filled = max(0, min(int(rating or 0), MAX_RATING))
    return "★" * filled + "☆" * (MAX_RATING - filled)


class PerformanceService:
    def __init__(self, reviews: PerformanceRepository):
        self._reviews = reviews

    def list_reviews(self) -> list[dict]:
        return [
            {
                "review_id": r.review_id,
                "employee_number": r.employee_number,
                "full_name": r.full_name,
                "department": r.department,
                "position": r.position,
                "review_date": fmt_date(r.review_date),
                "rating": r.rating,
                "stars": rating_stars(r.rating),
                "reviewer": r.reviewer_name or "-",
                "comments": r.comments or "",
            }
            for r in self._reviews.list_reviews()
        ]
