from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from .service import ReportData

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def report_to_xlsx(report: ReportData) -> bytes:
    """Write the report as an in-memory workbook (Summary + Departments sheets)."""
    summary = pd.DataFrame(
        [
            ("Total staff", report.total_employees),
            (f"Attendance rate since {report.attendance_since:%Y-%m-%d} (%)", report.attendance_rate),
            ("Pending leave requests", report.pending_leave),
            ("Average performance rating (/5.0)", report.avg_performance_rating),
            ("Total reviews", report.total_reviews),
        ],
        columns=["Metric", "Value"],
    )
    departments = pd.DataFrame(
        sorted(report.department_breakdown.items()),
        columns=["Department", "Employees"],
    )

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        summary.to_excel(writer, index=False, sheet_name="Summary")
        departments.to_excel(writer, index=False, sheet_name="Departments")
    return output.getvalue()
