"""Role -> permitted actions.

Every role check in the application goes through :func:`can` / :func:`require`
so adding a role means adding one entry to ``ROLE_PERMISSIONS``.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Union

from .enums import Role
from .exceptions import AuthorizationError


class Action(str, Enum):
    SUBMIT_LEAVE = "submit_leave"
    DECIDE_LEAVE = "decide_leave"
    VIEW_EMPLOYEES = "view_employees"
    VIEW_ATTENDANCE = "view_attendance"
    VIEW_PERFORMANCE = "view_performance"
    VIEW_REPORTS = "view_reports"
    EXPORT_REPORTS = "export_reports"


_EMPLOYEE_ACTIONS = frozenset({Action.SUBMIT_LEAVE, Action.VIEW_ATTENDANCE})

_MANAGER_ACTIONS = _EMPLOYEE_ACTIONS | {
    Action.DECIDE_LEAVE,
    Action.VIEW_EMPLOYEES,
    Action.VIEW_PERFORMANCE,
}

_HR_ACTIONS = _MANAGER_ACTIONS | {Action.VIEW_REPORTS, Action.EXPORT_REPORTS}

ROLE_PERMISSIONS: dict[Role, FrozenSet[Action]] = {
    Role.EMPLOYEE: _EMPLOYEE_ACTIONS,
    Role.DEPARTMENT_HEAD: frozenset(_MANAGER_ACTIONS),
    Role.HR: frozenset(_HR_ACTIONS),
    Role.ADMIN: frozenset(_HR_ACTIONS),
}


def _as_role(role: Union[Role, str, None]) -> Role | None:
    if role is None:
        return None
    if isinstance(role, Role):
        return role
    try:
        return Role(role)
    except ValueError:
        return None


def permissions_for(role: Union[Role, str, None]) -> FrozenSet[Action]:
    r = _as_role(role)
    if r is None:
        return frozenset()
    return ROLE_PERMISSIONS.get(r, frozenset())


def can(role: Union[Role, str, None], action: Action) -> bool:
    return action in permissions_for(role)


def require(role: Union[Role, str, None], action: Action) -> None:
    if not can(role, action):
        raise AuthorizationError("You do not have permission to perform this action")
