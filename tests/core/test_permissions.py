import pytest

from stafftrack.core.enums import Role
from stafftrack.core.exceptions import AuthorizationError
from stafftrack.core.permissions import ROLE_PERMISSIONS, Action, can, permissions_for, require


def test_every_role_has_an_entry():
    assert set(ROLE_PERMISSIONS) == set(Role)


@pytest.mark.parametrize("role", [Role.DEPARTMENT_HEAD, Role.HR, Role.ADMIN])
def test_approval_roles_can_decide_leave(role):
    assert can(role, Action.DECIDE_LEAVE)
    assert can(role.value, Action.DECIDE_LEAVE)


def test_employee_cannot_decide_or_view_reports():
    assert can(Role.EMPLOYEE, Action.SUBMIT_LEAVE)
    assert not can(Role.EMPLOYEE, Action.DECIDE_LEAVE)
    assert not can(Role.EMPLOYEE, Action.VIEW_REPORTS)


def test_department_head_sees_people_but_not_reports():
    assert can(Role.DEPARTMENT_HEAD, Action.VIEW_EMPLOYEES)
    assert can(Role.DEPARTMENT_HEAD, Action.VIEW_PERFORMANCE)
    assert not can(Role.DEPARTMENT_HEAD, Action.EXPORT_REPORTS)


def test_unknown_role_has_no_permissions():
    assert permissions_for("superuser") == frozenset()
    assert permissions_for(None) == frozenset()


def test_require_raises_authorization_error():
    require(Role.HR, Action.EXPORT_REPORTS)
    with pytest.raises(AuthorizationError):
        require(Role.EMPLOYEE, Action.EXPORT_REPORTS)
