from __future__ import annotations

from ..common.datetime_utils import fmt_date
from .model import DirectoryRow
from .repository import EmployeeRepository


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @staticmethod
    def _matches(row: DirectoryRow, needle: str) -> bool:
        haystack = (row.employee_number, row.full_name, row.email, row.department, row.position)
        return any(needle in (v or "").lower() for v in haystack)

    def list_directory(self, query: str = "") -> list[dict]:
        needle = (query or "").strip().lower()
        rows = self._employees.list_directory()
        if needle:
            rows = [r for r in rows if self._matches(r, needle)]

        return [
            {
                "employee_id": r.employee_id,
                "employee_number": r.employee_number,
                "full_name": r.full_name,
                "email": r.email,
                "department": r.department,
                "position": r.position,
                "hire_date": fmt_date(r.hire_date),
            }
            for r in rows
        ]
