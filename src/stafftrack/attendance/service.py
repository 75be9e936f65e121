from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import fmt_date, today_local
from .repository import AttendanceRepository


def _fmt_time(value) -> str:
    return value.strftime("%H:%M") if value else "-"


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_for_date(self, work_date: Optional[date] = None) -> list[dict]:
        work_date = work_date or today_local()
        return [
            {
                "attendance_id": r.attendance_id,
                "employee_number": r.employee_number,
                "full_name": r.full_name,
                "department": r.department,
                "position": r.position,
                "work_date": fmt_date(r.work_date),
                "check_in": _fmt_time(r.check_in_time),
                "check_out": _fmt_time(r.check_out_time),
                "status": r.status.value,
                "status_label": r.status.value.replace("_", " "),
                "notes": r.notes or "",
            }
            for r in self._attendance.list_for_date(work_date)
        ]
