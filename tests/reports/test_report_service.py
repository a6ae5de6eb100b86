from __future__ import annotations

import csv
import io
from datetime import date, datetime

import pytest

from hrms.core.exceptions import ValidationError
from hrms.reports.export import REPORT_COLUMNS, report_csv_bytes, report_xlsx_bytes
from hrms.reports.service import default_range


@pytest.fixture()
def seeded(services, employee):
    other = services.employee_service.create(
        full_name="Meera Iyer", email="meera@example.com", department="Finance", base_salary="30000"
    )
    att = services.attendance_service
    # employee: one on-time full day, one late day
    att.check_in(employee.employee_id, now=datetime(2025, 3, 3, 9, 0))
    att.check_out(employee.employee_id, now=datetime(2025, 3, 3, 18, 0))
    att.check_in(employee.employee_id, now=datetime(2025, 3, 4, 9, 30))
    att.check_out(employee.employee_id, now=datetime(2025, 3, 4, 18, 0))
    # other: left early once
    att.check_in(other.employee_id, now=datetime(2025, 3, 3, 8, 45))
    att.check_out(other.employee_id, now=datetime(2025, 3, 3, 15, 45))
    return services, employee, other


def test_attendance_report_rows_and_summary(seeded):
    services, employee, other = seeded

    data = services.report_service.build_attendance_report(start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert [(r["work_date"], r["employee_id"]) for r in data.rows] == [
        ("2025-03-03", employee.employee_id),
        ("2025-03-03", other.employee_id),
        ("2025-03-04", employee.employee_id),
    ]
    by_id = {s["employee_id"]: s for s in data.summary}
    assert by_id[employee.employee_id]["days_present"] == 2
    assert by_id[employee.employee_id]["late_days"] == 1
    assert by_id[employee.employee_id]["total_hours"] == "17:30"
    assert by_id[other.employee_id]["total_hours"] == "07:00"


def test_department_filter(seeded):
    services, _, other = seeded

    data = services.report_service.build_attendance_report(
        start=date(2025, 3, 1), end=date(2025, 3, 31), department="finance"
    )

    assert {r["employee_id"] for r in data.rows} == {other.employee_id}


def test_summary_counts(seeded):
    services, employee, _ = seeded
    services.payroll_service.generate(period="2025-03")

    summary = services.report_service.summary(start=date(2025, 3, 1), end=date(2025, 3, 31), period="2025-03")

    assert summary["headcount"]["active"] == 2
    assert summary["headcount"]["by_department"] == {"Engineering": 1, "Finance": 1}
    assert summary["attendance"]["ON_TIME"] == 1
    assert summary["attendance"]["LATE"] == 1
    assert summary["attendance"]["EARLY_LEAVE"] == 1
    assert summary["payroll"]["records"] == 2
    assert summary["payroll"]["total_net_pay"] == "52000.00"


def test_csv_export_has_bom_and_header(seeded):
    services, _, _ = seeded
    data = services.report_service.build_attendance_report(start=date(2025, 3, 1), end=date(2025, 3, 31))

    body = report_csv_bytes(data)

    assert body.startswith(b"\xef\xbb\xbf")
    rows = list(csv.reader(io.StringIO(body.decode("utf-8-sig"))))
    assert rows[0] == REPORT_COLUMNS
    assert len(rows) == 4


def test_xlsx_export_is_a_zip_workbook(seeded):
    services, _, _ = seeded
    data = services.report_service.build_attendance_report(start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert report_xlsx_bytes(data)[:2] == b"PK"


def test_default_range_is_thirty_days_ending_on_end():
    start, end = default_range(None, date(2025, 3, 30))

    assert (start, end) == (date(2025, 3, 1), date(2025, 3, 30))
    with pytest.raises(ValidationError):
        default_range(date(2025, 3, 30), date(2025, 3, 1))
