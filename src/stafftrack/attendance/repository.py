from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRow


class AttendanceRepository(Protocol):
    def list_for_date(self, work_date: date) -> Sequence[AttendanceRow]:
        """Records of one day ordered by check-in time."""

        raise NotImplementedError

    def list_statuses_since(self, start_date: date) -> Sequence[AttendanceStatus]:
        """Status of every record with ``work_date >= start_date``."""

        raise NotImplementedError
