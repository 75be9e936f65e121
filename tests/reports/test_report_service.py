from __future__ import annotations

import io
from datetime import date, timedelta

from openpyxl import load_workbook

from stafftrack.core.enums import AttendanceStatus, Role
from stafftrack.leaves.service import LeaveService
from stafftrack.reports.service import ReportService


def _report_service(world) -> ReportService:
    return ReportService(world.employees, LeaveService(world.leaves, world.employees), world.attendance, world.reviews)


def test_build_report_aggregates_all_sources(world, fixed_today):
    leaves = LeaveService(world.leaves, world.employees)
    first = leaves.submit(
        actor_user_id=4,
        start_date=fixed_today + timedelta(days=10),
        end_date=fixed_today + timedelta(days=11),
        reason="Trip",
        today=fixed_today,
    )
    leaves.submit(
        actor_user_id=3,
        start_date=fixed_today + timedelta(days=20),
        end_date=fixed_today + timedelta(days=21),
        reason="Conference",
        today=fixed_today,
    )
    leaves.decide(request_id=first.request_id, decision="approved", actor_user_id=2, actor_role=Role.HR)

    world.attendance.add(date(2026, 1, 20), AttendanceStatus.PRESENT)  # older than a month
    world.attendance.add(date(2026, 2, 2), AttendanceStatus.PRESENT)
    world.attendance.add(date(2026, 2, 20), AttendanceStatus.LATE)
    world.attendance.add(date(2026, 3, 1), AttendanceStatus.PRESENT)
    world.attendance.add(date(2026, 3, 2), AttendanceStatus.ABSENT)
    world.reviews.ratings.extend([4, 5, 3])

    report = _report_service(world).build_report(today=fixed_today)

    assert report.total_employees == 3
    assert report.department_breakdown == {"Human Resources": 1, "Engineering": 2}
    assert report.pending_leave == 1
    assert report.attendance_since == date(2026, 2, 2)
    assert report.attendance_rate == "50.0"
    assert report.avg_performance_rating == "4.0"
    assert report.total_reviews == 3
    assert report.as_dict()["attendance_since"] == "2026-02-02"


def test_build_report_on_empty_store(world, fixed_today):
    world.employees.employees.clear()

    report = _report_service(world).build_report(today=fixed_today)

    assert report.total_employees == 0
    assert report.department_breakdown == {}
    assert report.attendance_rate == "0"
    assert report.avg_performance_rating == "N/A"


def test_dashboard_counts_present_since_first_of_month(world, fixed_today):
    world.attendance.add(date(2026, 2, 28), AttendanceStatus.PRESENT)
    world.attendance.add(date(2026, 3, 1), AttendanceStatus.PRESENT)
    world.attendance.add(date(2026, 3, 2), AttendanceStatus.PRESENT)
    world.attendance.add(date(2026, 3, 2), AttendanceStatus.LATE)

    stats = _report_service(world).dashboard_stats(today=fixed_today)

    assert stats.total_employees == 3
    assert stats.attendance_this_month == 2
    assert stats.pending_leave_requests == 0
    assert stats.total_leave_requests == 0


def test_export_report_returns_a_workbook(world, fixed_today):
    world.reviews.ratings.append(5)

    payload = _report_service(world).export_report(today=fixed_today)

    wb = load_workbook(io.BytesIO(payload))
    summary = {row[0]: row[1] for row in wb["Summary"].iter_rows(min_row=2, values_only=True)}
    assert summary["Total staff"] == 3
    assert summary["Total reviews"] == 1


def test_dashboard_leave_cards_follow_status_counts(world, fixed_today):
    leaves = LeaveService(world.leaves, world.employees)
    for days in (10, 12, 14):
        leaves.submit(
            actor_user_id=4,
            start_date=fixed_today + timedelta(days=days),
            end_date=fixed_today + timedelta(days=days + 1),
            reason="Trip",
            today=fixed_today,
        )
    leaves.decide(request_id=1, decision="rejected", actor_user_id=3, actor_role=Role.DEPARTMENT_HEAD)

    stats = _report_service(world).dashboard_stats(today=fixed_today)

    assert stats.pending_leave_requests == 2
    assert stats.total_leave_requests == 3
