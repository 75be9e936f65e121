from __future__ import annotations

from flask import Flask, request

from ..common.web import ok, permission_required
from ..core.permissions import Action
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="employees")
    @permission_required(Action.VIEW_EMPLOYEES)
    def employees():
        query = request.args.get("q", "")
        rows = container.employee_service.list_directory(query)
        if not rows:
            message = "No employees found matching your search" if query.strip() else "No employees found"
        else:
            message = ""
        return ok({"employees": rows, "count": len(rows)}, message=message)
