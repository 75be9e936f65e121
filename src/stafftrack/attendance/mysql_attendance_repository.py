from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import AttendanceRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.attendance_id, a.employee_id, a.work_date,
                       a.check_in_time, a.check_out_time, a.status, a.notes,
                       e.employee_number, e.department, e.position,
                       u.full_name
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                JOIN users u ON u.user_id = e.user_id
                WHERE a.work_date=%s
                ORDER BY a.check_in_time IS NULL, a.check_in_time
                """,
                (work_date,),
            )
            return [
                AttendanceRow(
                    attendance_id=int(r["attendance_id"]),
                    employee_id=int(r["employee_id"]),
                    employee_number=r["employee_number"],
                    full_name=r["full_name"],
                    department=r["department"],
                    position=r["position"],
                    work_date=r["work_date"],
                    check_in_time=normalize_mysql_time(r.get("check_in_time")),
                    check_out_time=normalize_mysql_time(r.get("check_out_time")),
                    status=AttendanceStatus(r["status"]),
                    notes=r.get("notes"),
                )
                for r in fetchall(cur)
            ]

    def list_statuses_since(self, start_date: date) -> Sequence[AttendanceStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT status FROM attendance WHERE work_date >= %s", (start_date,))
            return [AttendanceStatus(r["status"]) for r in fetchall(cur)]
