from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(self, *, employee_id: int, start_date: date, end_date: date, reason: str) -> int:
        """Insert a pending request and return its id."""

        raise NotImplementedError

    def get(self, *, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: int,
        status: LeaveStatus,
        approved_by: int,
        approved_at: datetime,
    ) -> bool:
        """Apply a decision only while the request is still pending.

        Returns False when no pending row matched.
        """

        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[dict]:
        """Return UI rows (joined with employee, profile and approver)."""

        raise NotImplementedError

    def list_statuses(self) -> Sequence[LeaveStatus]:
        raise NotImplementedError
