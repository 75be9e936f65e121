from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee record linked to one user account."""

    employee_id: int
    user_id: int
    employee_number: str
    department: str
    position: str
    hire_date: date


@dataclass(frozen=True)
class DirectoryRow:
    """Read-model for the directory (employee joined with its profile)."""

    employee_id: int
    employee_number: str
    full_name: str
    email: str
    department: str
    position: str
    hire_date: date
