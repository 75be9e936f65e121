"""In-memory repositories shared by the service and API tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from werkzeug.security import generate_password_hash

from stafftrack.container import Container, wire
from stafftrack.core.enums import AttendanceStatus, LeaveStatus, Role
from stafftrack.core.exceptions import PersistenceError
from stafftrack.employees.model import DirectoryRow, Employee
from stafftrack.leaves.model import LeaveRequest
from stafftrack.performance.model import ReviewRow
from stafftrack.users.model import User

PASSWORD = "secret123"
TODAY = date(2026, 3, 2)
NOW = datetime(2026, 3, 2, 10, 30, 0)


@dataclass
class InMemoryUsers:
    users: dict[int, User] = field(default_factory=dict)

    def add(self, user_id: int, full_name: str, role: Role, *, is_active: bool = True) -> User:
        user = User(
            user_id=user_id,
            full_name=full_name,
            email=f"{full_name.split()[0].lower()}@example.com",
            password_hash=generate_password_hash(PASSWORD),
            role=role,
            is_active=is_active,
        )
        self.users[user_id] = user
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        for u in self.users.values():
            if u.email == email:
                return u
        return None


@dataclass
class InMemoryEmployees:
    users: InMemoryUsers
    employees: dict[int, Employee] = field(default_factory=dict)

    def add(self, employee_id: int, user_id: int, department: str, position: str = "Engineer") -> Employee:
        emp = Employee(
            employee_id=employee_id,
            user_id=user_id,
            employee_number=f"EMP-{employee_id:04d}",
            department=department,
            position=position,
            hire_date=date(2024, 1, employee_id % 28 + 1),
        )
        self.employees[employee_id] = emp
        return emp

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        for e in self.employees.values():
            if e.user_id == user_id:
                return e
        return None

    def list_directory(self):
        out = []
        for e in sorted(self.employees.values(), key=lambda x: x.employee_id, reverse=True):
            u = self.users.get_by_id(e.user_id)
            out.append(
                DirectoryRow(
                    employee_id=e.employee_id,
                    employee_number=e.employee_number,
                    full_name=u.full_name,
                    email=u.email,
                    department=e.department,
                    position=e.position,
                    hire_date=e.hire_date,
                )
            )
        return out

    def list_departments(self):
        return [e.department for e in self.employees.values()]


class InMemoryLeaves:
    def __init__(self):
        self._next_id = 1
        self.requests: dict[int, LeaveRequest] = {}
        self.fail_writes = False
        # simulates a concurrent decision landing between get() and decide()
        self.race_with: Optional[LeaveStatus] = None

    def create(self, *, employee_id, start_date, end_date, reason):
        if self.fail_writes:
            raise PersistenceError("insert rejected")
        rid = self._next_id
        self._next_id += 1
        self.requests[rid] = LeaveRequest(
            request_id=rid,
            employee_id=int(employee_id),
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            created_at=datetime(2026, 3, 2, 9, 0, 0),
        )
        return rid

    def get(self, *, request_id):
        return self.requests.get(int(request_id))

    def decide(self, *, request_id, status, approved_by, approved_at):
        req = self.requests.get(int(request_id))
        if self.race_with is not None and req is not None:
            req = replace(req, status=self.race_with, approved_by=999, approved_at=approved_at)
            self.requests[req.request_id] = req
            self.race_with = None
        if not req or req.status != LeaveStatus.PENDING:
            return False
        self.requests[req.request_id] = replace(
            req,
            status=status,
            approved_by=int(approved_by),
            approved_at=approved_at,
        )
        return True

    def list_requests(self, *, status=None, employee_id=None, limit=500):
        rows = []
        for r in sorted(self.requests.values(), key=lambda x: x.request_id, reverse=True):
            if status is not None and r.status != status:
                continue
            if employee_id is not None and r.employee_id != employee_id:
                continue
            rows.append(
                {
                    "request_id": r.request_id,
                    "employee_id": r.employee_id,
                    "start_date": r.start_date.strftime("%Y-%m-%d"),
                    "end_date": r.end_date.strftime("%Y-%m-%d"),
                    "reason": r.reason,
                    "status": r.status.value,
                }
            )
        return rows[:limit]

    def list_statuses(self):
        return [r.status for r in self.requests.values()]


@dataclass
class InMemoryAttendance:
    records: list = field(default_factory=list)

    def add(self, work_date: date, status: AttendanceStatus) -> None:
        self.records.append((work_date, status))

    def list_for_date(self, work_date):
        return []

    def list_statuses_since(self, start_date):
        return [s for d, s in self.records if d >= start_date]


@dataclass
class InMemoryReviews:
    ratings: list = field(default_factory=list)

    def list_reviews(self):
        return [
            ReviewRow(
                review_id=i + 1,
                employee_id=1,
                employee_number="EMP-0001",
                full_name="A",
                department="Engineering",
                position="Engineer",
                review_date=date(2026, 1, 15),
                rating=r,
            )
            for i, r in enumerate(self.ratings)
        ]

    def list_ratings(self):
        return list(self.ratings)


@dataclass
class World:
    users: InMemoryUsers
    employees: InMemoryEmployees
    leaves: InMemoryLeaves
    attendance: InMemoryAttendance
    reviews: InMemoryReviews

    def container(self) -> Container:
        return wire(
            users_repo=self.users,
            employees_repo=self.employees,
            attendance_repo=self.attendance,
            leaves_repo=self.leaves,
            reviews_repo=self.reviews,
        )


def build_world() -> World:
    """One user per role; every user except the admin has an employee record."""
    users = InMemoryUsers()
    users.add(1, "Admin Person", Role.ADMIN)
    users.add(2, "Helen Hr", Role.HR)
    users.add(3, "Dana Head", Role.DEPARTMENT_HEAD)
    users.add(4, "Eve Employee", Role.EMPLOYEE)

    employees = InMemoryEmployees(users)
    employees.add(2, 2, "Human Resources", "HR Manager")
    employees.add(3, 3, "Engineering", "Head of Engineering")
    employees.add(4, 4, "Engineering", "Software Engineer")

    return World(
        users=users,
        employees=employees,
        leaves=InMemoryLeaves(),
        attendance=InMemoryAttendance(),
        reviews=InMemoryReviews(),
    )
