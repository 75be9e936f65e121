from __future__ import annotations

from flask import Flask

from ..common.web import ok, permission_required
from ..core.permissions import Action
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/performance", methods=["GET"], endpoint="performance")
    @permission_required(Action.VIEW_PERFORMANCE)
    def performance():
        rows = container.performance_service.list_reviews()
        message = "" if rows else "No performance reviews found"
        return ok({"reviews": rows}, message=message)
