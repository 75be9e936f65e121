from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import fmt_date, today_local
from ..common.web import ok, parse_date_arg, permission_required
from ..core.permissions import Action
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    @permission_required(Action.VIEW_ATTENDANCE)
    def attendance():
        raw = request.args.get("date")
        work_date = parse_date_arg(raw, "date") if raw else today_local()

        rows = container.attendance_service.list_for_date(work_date)
        message = "" if rows else "No attendance records found for this date"
        return ok({"date": fmt_date(work_date), "records": rows}, message=message)
