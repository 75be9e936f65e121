from __future__ import annotations

from flask import Flask, session

from ..common.web import current_user_id, login_required, ok, request_payload
from ..core.permissions import permissions_for
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request_payload()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value

        return ok({"user": _user_payload(s_user)}, message="Logged in")

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Logged out")

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        s_user = container.auth_service.get_session_user(current_user_id())
        return ok({"user": _user_payload(s_user)})


def _user_payload(s_user) -> dict:
    return {
        "user_id": s_user.user_id,
        "full_name": s_user.full_name,
        "email": s_user.email,
        "role": s_user.role.value,
        "permissions": sorted(a.value for a in permissions_for(s_user.role)),
    }
