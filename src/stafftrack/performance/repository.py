from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ReviewRow


class PerformanceRepository(Protocol):
    def list_reviews(self) -> Sequence[ReviewRow]:
        """All reviews, newest review date first."""

        raise NotImplementedError

    def list_ratings(self) -> Sequence[Optional[int]]:
        raise NotImplementedError
