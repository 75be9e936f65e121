from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import first_of_month, months_ago, today_local
from ..core.constants import ATTENDANCE_REPORT_MONTHS
from ..core.enums import LeaveStatus
from ..employees.repository import EmployeeRepository
from ..leaves.service import LeaveService
from ..performance.repository import PerformanceRepository
from .aggregates import attendance_rate, average_rating, count_present, department_breakdown
from .export import report_to_xlsx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    pending_leave_requests: int
    total_leave_requests: int
    attendance_this_month: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ReportData:
    total_employees: int
    department_breakdown: dict[str, int]
    pending_leave: int
    attendance_rate: str
    attendance_since: date
    avg_performance_rating: str
    total_reviews: int

    def as_dict(self) -> dict:
        out = asdict(self)
        out["attendance_since"] = self.attendance_since.strftime("%Y-%m-%d")
        return out


class ReportService:
    """Aggregate figures for the dashboard cards and the analytics report."""

    def __init__(
        self,
        employees: EmployeeRepository,
        leaves: LeaveService,
        attendance: AttendanceRepository,
        reviews: PerformanceRepository,
    ):
        self._employees = employees
        self._leaves = leaves
        self._attendance = attendance
        self._reviews = reviews

    def dashboard_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or today_local()
        leave_counts = self._leaves.count_by_status()

        return DashboardStats(
            total_employees=len(self._employees.list_departments()),
            pending_leave_requests=leave_counts[LeaveStatus.PENDING.value],
            total_leave_requests=sum(leave_counts.values()),
            attendance_this_month=count_present(self._attendance.list_statuses_since(first_of_month(today))),
        )

    def build_report(self, *, today: Optional[date] = None) -> ReportData:
        today = today or today_local()
        since = months_ago(today, ATTENDANCE_REPORT_MONTHS)

        departments = list(self._employees.list_departments())
        ratings = list(self._reviews.list_ratings())
        pending = self._leaves.count_by_status()[LeaveStatus.PENDING.value]

        report = ReportData(
            total_employees=len(departments),
            department_breakdown=department_breakdown(departments),
            pending_leave=pending,
            attendance_rate=attendance_rate(self._attendance.list_statuses_since(since)),
            attendance_since=since,
            avg_performance_rating=average_rating(ratings),
            total_reviews=len(ratings),
        )
        logger.debug("Built report for %s: %s", today, report)
        return report

    def export_report(self, *, today: Optional[date] = None) -> bytes:
        report = self.build_report(today=today)
        logger.info("Exporting report (%d employees)", report.total_employees)
        return report_to_xlsx(report)
