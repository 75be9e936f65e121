from stafftrack.core.enums import AttendanceStatus
from stafftrack.reports.aggregates import attendance_rate, average_rating, department_breakdown


def test_department_breakdown_counts_each_department():
    assert department_breakdown(["Engineering", "HR", "Engineering"]) == {"Engineering": 2, "HR": 1}
    assert department_breakdown([]) == {}


def test_attendance_rate_counts_only_present():
    statuses = [
        AttendanceStatus.PRESENT,
        AttendanceStatus.PRESENT,
        AttendanceStatus.LATE,
        AttendanceStatus.ABSENT,
        AttendanceStatus.HALF_DAY,
        AttendanceStatus.PRESENT,
    ]
    assert attendance_rate(statuses) == "50.0"


def test_attendance_rate_without_records_is_zero():
    assert attendance_rate([]) == "0"


def test_average_rating_treats_unrated_as_zero():
    assert average_rating([5, 4, None]) == "3.0"
    assert average_rating([4, 5]) == "4.5"


def test_average_rating_without_reviews():
    assert average_rating([]) == "N/A"
