from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role label attached to an account, used for permission checks."""

    EMPLOYEE = "employee"
    DEPARTMENT_HEAD = "department_head"
    HR = "hr"
    ADMIN = "admin"


class LeaveStatus(str, Enum):
    """Leave request lifecycle: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half_day"
