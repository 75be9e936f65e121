from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DirectoryRow, Employee


class EmployeeRepository(Protocol):
    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_directory(self) -> Sequence[DirectoryRow]:
        """Employees joined with profile, newest first."""

        raise NotImplementedError

    def list_departments(self) -> Sequence[str]:
        """One department value per employee (for breakdowns)."""

        raise NotImplementedError
