from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.web import login_required, ok, permission_required
from ..core.permissions import Action
from ..container import Container
from .export import XLSX_MIMETYPE


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        stats = container.report_service.dashboard_stats()
        return ok({"stats": stats.as_dict()})

    @app.route("/reports", methods=["GET"], endpoint="reports")
    @permission_required(Action.VIEW_REPORTS)
    def reports():
        report = container.report_service.build_report()
        return ok({"report": report.as_dict()})

    @app.route("/reports/export", methods=["GET"], endpoint="export_reports")
    @permission_required(Action.EXPORT_REPORTS)
    def export_reports():
        return send_file(
            io.BytesIO(container.report_service.export_report()),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name="stafftrack_report.xlsx",
        )
