"""Flask helpers shared by every controller: session guards and JSON envelopes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from functools import wraps

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..core.permissions import Action, can
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (PersistenceError, 500),
)


def ok(payload: dict | None = None, *, message: str = "", status: int = 200):
    body = {"success": True, "message": message}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role | None:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def permission_required(action: Action):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return fail("Please log in to continue", 401)
            if not can(session.get("role"), action):
                return fail("You do not have permission to perform this action", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def request_payload() -> Mapping:
    """JSON object body, or the submitted form when the body is not JSON."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_date_arg(value: str | None, field_name: str) -> date:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    try:
        return parse_iso_date((value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        for error_type, status in _STATUS_BY_ERROR:
            if isinstance(e, error_type):
                if status >= 500:
                    logger.error("Request failed: %s", e)
                    return fail("Database error, please try again", status)
                return fail(str(e), status)
        return fail(str(e), 400)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return fail(e.description or e.name, int(e.code or 500))
        logger.exception("Unhandled error")
        return fail("Internal server error", 500)
