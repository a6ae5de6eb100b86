from __future__ import annotations

from flask import Blueprint, Flask

from ..common.datetime_utils import parse_optional_date
from ..common.http import arg, json_endpoint, request_payload, success
from ..common.validators import parse_positive_int
from ..container import Container
from .service import attendance_to_api


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("attendance", __name__, url_prefix="/api/attendance")
    service = container.attendance_service

    @bp.route("/check-in", methods=["POST"], endpoint="check_in")
    @json_endpoint
    def check_in():
        data = request_payload()
        employee_id = parse_positive_int(data.get("employee_id"), "employee_id")
        record = service.check_in(employee_id, note=data.get("note"))
        return success(attendance_to_api(record), 201)

    @bp.route("/check-out", methods=["POST"], endpoint="check_out")
    @json_endpoint
    def check_out():
        data = request_payload()
        employee_id = parse_positive_int(data.get("employee_id"), "employee_id")
        return success(attendance_to_api(service.check_out(employee_id)))

    @bp.route("", methods=["GET"], endpoint="list")
    @json_endpoint
    def list_records():
        employee_id = arg("employee_id")
        rows = service.list(
            employee_id=parse_positive_int(employee_id, "employee_id") if employee_id else None,
            start=parse_optional_date(arg("start"), "start"),
            end=parse_optional_date(arg("end"), "end"),
        )
        return success([attendance_to_api(r) for r in rows])

    @bp.route("/today/<int:employee_id>", methods=["GET"], endpoint="today")
    @json_endpoint
    def today(employee_id: int):
        record = service.get_today_record(employee_id)
        return success(attendance_to_api(record) if record else None)

    @bp.route("/<int:attendance_id>", methods=["PUT"], endpoint="correct")
    @json_endpoint
    def correct(attendance_id: int):
        data = request_payload()
        record = service.correct(
            attendance_id,
            check_in_time=data.get("check_in_time"),
            check_out_time=data.get("check_out_time"),
            note=data.get("note"),
        )
        return success(attendance_to_api(record))

    app.register_blueprint(bp)
