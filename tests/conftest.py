from __future__ import annotations

from datetime import date, datetime

import pytest

from fakes import NOW, PASSWORD, TODAY, build_world
from stafftrack.main import create_app


@pytest.fixture
def fixed_today() -> date:
    return TODAY


@pytest.fixture
def fixed_now() -> datetime:
    return NOW


@pytest.fixture
def world():
    return build_world()


@pytest.fixture
def app(world):
    app = create_app(container=world.container(), settings_module="stafftrack.config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client, world):
    def _login(user_id: int):
        user = world.users.get_by_id(user_id)
        resp = client.post("/auth/login", json={"email": user.email, "password": PASSWORD})
        assert resp.status_code == 200, resp.get_json()
        return user

    return _login
