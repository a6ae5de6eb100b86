"""CSV / Excel rendering of attendance report rows."""

from __future__ import annotations

import csv
import io

import pandas as pd

from .service import ReportData

REPORT_COLUMNS = [
    "work_date",
    "employee_id",
    "full_name",
    "email",
    "department",
    "check_in",
    "check_out",
    "status",
    "worked_hours",
    "note",
]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def report_csv_bytes(data: ReportData) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS, extrasaction="ignore")
    writer.writeheader()
    for row in data.rows:
        writer.writerow(row)
    # BOM so Excel opens the file as UTF-8.
    return out.getvalue().encode("utf-8-sig")


def report_xlsx_bytes(data: ReportData) -> bytes:
    details = pd.DataFrame(data.rows, columns=REPORT_COLUMNS)
    summary = pd.DataFrame(
        data.summary,
        columns=["employee_id", "full_name", "days_present", "late_days", "total_hours"],
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        details.to_excel(writer, sheet_name="Attendance", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)
    return out.getvalue()
