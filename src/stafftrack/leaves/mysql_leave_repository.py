from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import fmt_date
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_id: int, start_date: date, end_date: date, reason: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, start_date, end_date, reason, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), start_date, end_date, reason, LeaveStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get(self, *, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, start_date, end_date, reason,
                       status, created_at, approved_by, approved_at
                FROM leave_requests
                WHERE request_id=%s
                """,
                (int(request_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return LeaveRequest(
                request_id=int(r["request_id"]),
                employee_id=int(r["employee_id"]),
                start_date=r["start_date"],
                end_date=r["end_date"],
                reason=r["reason"],
                status=LeaveStatus(r["status"]),
                created_at=r["created_at"],
                approved_by=r.get("approved_by"),
                approved_at=r.get("approved_at"),
            )

    def decide(
        self,
        *,
        request_id: int,
        status: LeaveStatus,
        approved_by: int,
        approved_at: datetime,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, approved_by=%s, approved_at=%s
                WHERE request_id=%s AND status=%s
                """,
                (
                    status.value,
                    int(approved_by),
                    approved_at,
                    int(request_id),
                    LeaveStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[dict]:
        clauses = ["1=1"]
        params: list[object] = []

        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)
        if employee_id is not None:
            clauses.append("r.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.request_id, r.employee_id, r.start_date, r.end_date, r.reason,
                       r.status, r.created_at, r.approved_at,
                       e.employee_number, e.department,
                       u.full_name, u.email,
                       a.full_name AS approver_name
                FROM leave_requests r
                JOIN employees e ON e.employee_id = r.employee_id
                JOIN users u ON u.user_id = e.user_id
                LEFT JOIN users a ON a.user_id = r.approved_by
                WHERE {where}
                ORDER BY r.created_at DESC, r.request_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            out: list[dict] = []
            for r in fetchall(cur):
                out.append(
                    {
                        "request_id": int(r["request_id"]),
                        "employee_id": int(r["employee_id"]),
                        "employee_number": r["employee_number"],
                        "full_name": r["full_name"],
                        "email": r["email"],
                        "department": r["department"],
                        "start_date": fmt_date(r["start_date"]),
                        "end_date": fmt_date(r["end_date"]),
                        "reason": r["reason"],
                        "status": r["status"],
                        "created_at": r["created_at"].strftime("%Y-%m-%d %H:%M"),
                        "approver": r.get("approver_name") or "",
                        "approved_at": (r["approved_at"].strftime("%Y-%m-%d %H:%M") if r.get("approved_at") else ""),
                    }
                )
            return out

    def list_statuses(self) -> Sequence[LeaveStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT status FROM leave_requests")
            return [LeaveStatus(r["status"]) for r in fetchall(cur)]
