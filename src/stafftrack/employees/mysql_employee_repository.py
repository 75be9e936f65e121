from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DirectoryRow, Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, user_id, employee_number, department, position, hire_date
                FROM employees
                WHERE user_id=%s
                """,
                (int(user_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=int(r["employee_id"]),
                user_id=int(r["user_id"]),
                employee_number=r["employee_number"],
                department=r["department"],
                position=r["position"],
                hire_date=r["hire_date"],
            )

    def list_directory(self) -> Sequence[DirectoryRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.employee_number, e.department, e.position, e.hire_date,
                       u.full_name, u.email
                FROM employees e
                JOIN users u ON u.user_id = e.user_id
                ORDER BY e.created_at DESC, e.employee_id DESC
                """
            )
            return [
                DirectoryRow(
                    employee_id=int(r["employee_id"]),
                    employee_number=r["employee_number"],
                    full_name=r["full_name"],
                    email=r["email"],
                    department=r["department"],
                    position=r["position"],
                    hire_date=r["hire_date"],
                )
                for r in fetchall(cur)
            ]

    def list_departments(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department FROM employees")
            return [r["department"] for r in fetchall(cur)]
