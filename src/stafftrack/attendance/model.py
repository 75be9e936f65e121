from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model: one attendance record joined with employee and profile."""

    attendance_id: int
    employee_id: int
    employee_number: str
    full_name: str
    department: str
    position: str
    work_date: date
    check_in_time: Optional[time]
    check_out_time: Optional[time]
    status: AttendanceStatus
    notes: Optional[str] = None
