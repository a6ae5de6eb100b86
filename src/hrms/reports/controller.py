from __future__ import annotations

from flask import Blueprint, Flask

from ..common.datetime_utils import parse_optional_date
from ..common.http import arg, json_endpoint, success
from ..common.validators import parse_positive_int
from ..container import Container
from .export import XLSX_MIMETYPE, report_csv_bytes, report_xlsx_bytes
from .service import default_range


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("reports", __name__, url_prefix="/api/reports")
    service = container.report_service

    def _range():
        return default_range(parse_optional_date(arg("start"), "start"), parse_optional_date(arg("end"), "end"))

    def _attendance_report():
        start, end = _range()
        employee_id = arg("employee_id")
        data = service.build_attendance_report(
            start=start,
            end=end,
            employee_id=parse_positive_int(employee_id, "employee_id") if employee_id else None,
            department=arg("department"),
        )
        return start, end, data

    def _download(body: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @bp.route("/summary", methods=["GET"], endpoint="summary")
    @json_endpoint
    def summary():
        start, end = _range()
        return success(service.summary(start=start, end=end, period=arg("period")))

    @bp.route("/attendance", methods=["GET"], endpoint="attendance")
    @json_endpoint
    def attendance():
        start, end, data = _attendance_report()
        return success(
            {
                "start": start.isoformat(),
                "end": end.isoformat(),
                "rows": data.rows,
                "summary": data.summary,
            }
        )

    @bp.route("/attendance.csv", methods=["GET"], endpoint="attendance_csv")
    @json_endpoint
    def attendance_csv():
        start, end, data = _attendance_report()
        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _download(report_csv_bytes(data), mimetype="text/csv", filename=filename)

    @bp.route("/attendance.xlsx", methods=["GET"], endpoint="attendance_xlsx")
    @json_endpoint
    def attendance_xlsx():
        start, end, data = _attendance_report()
        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.xlsx"
        return _download(report_xlsx_bytes(data), mimetype=XLSX_MIMETYPE, filename=filename)

    app.register_blueprint(bp)
