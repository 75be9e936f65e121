from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: leave request.

    ``approved_by`` and ``approved_at`` are set together, by the single decision
    that moves the request out of ``pending``.
    """

    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    created_at: datetime
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None

    @property
    def is_decided(self) -> bool:
        return self.status != LeaveStatus.PENDING
