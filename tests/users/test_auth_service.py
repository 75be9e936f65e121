import pytest

from fakes import PASSWORD, InMemoryUsers
from stafftrack.core.enums import Role
from stafftrack.core.exceptions import AuthenticationError, NotFoundError
from stafftrack.users.service import AuthService


@pytest.fixture
def users():
    repo = InMemoryUsers()
    repo.add(1, "Helen Hr", Role.HR)
    repo.add(2, "Gone User", Role.EMPLOYEE, is_active=False)
    return repo


def test_authenticate_returns_session_user(users):
    s_user = AuthService(users).authenticate(" Helen@Example.com ", PASSWORD)
    assert s_user.user_id == 1
    assert s_user.role == Role.HR


@pytest.mark.parametrize(
    "email, password",
    [
        ("helen@example.com", "wrong"),
        ("nobody@example.com", PASSWORD),
        ("gone@example.com", PASSWORD),
        ("", PASSWORD),
    ],
)
def test_authenticate_rejects_bad_credentials(users, email, password):
    with pytest.raises(AuthenticationError):
        AuthService(users).authenticate(email, password)


def test_placeholder_hash_never_authenticates(users):
    from dataclasses import replace

    users.users[1] = replace(users.users[1], password_hash="CHANGE_ME")
    with pytest.raises(AuthenticationError):
        AuthService(users).authenticate("helen@example.com", PASSWORD)


def test_get_session_user_requires_active_account(users):
    svc = AuthService(users)
    assert svc.get_session_user(1).full_name == "Helen Hr"
    with pytest.raises(NotFoundError):
        svc.get_session_user(2)
