from __future__ import annotations

from flask import Blueprint, Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import arg, json_endpoint, request_payload, success
from ..common.validators import parse_positive_int
from ..container import Container
from .service import leave_to_api, parse_request_status


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("leave", __name__, url_prefix="/api/leave")
    service = container.leave_service

    @bp.route("", methods=["POST"], endpoint="create")
    @json_endpoint
    def create_leave():
        data = request_payload()
        req = service.create(
            employee_id=parse_positive_int(data.get("employee_id"), "employee_id"),
            start_date=parse_iso_date(data.get("start_date") or "", "start_date"),
            end_date=parse_iso_date(data.get("end_date") or "", "end_date"),
            leave_type=data.get("leave_type"),
            reason=data.get("reason", ""),
        )
        return success(leave_to_api(req), 201)

    @bp.route("", methods=["GET"], endpoint="list")
    @json_endpoint
    def list_leave():
        status = arg("status")
        employee_id = arg("employee_id")
        rows = service.list(
            status=parse_request_status(status) if status else None,
            employee_id=parse_positive_int(employee_id, "employee_id") if employee_id else None,
        )
        return success([leave_to_api(r) for r in rows])

    @bp.route("/<int:request_id>", methods=["GET"], endpoint="get")
    @json_endpoint
    def get_leave(request_id: int):
        return success(leave_to_api(service.get(request_id)))

    @bp.route("/<int:request_id>/approve", methods=["POST"], endpoint="approve")
    @json_endpoint
    def approve_leave(request_id: int):
        note = request_payload().get("admin_note", "")
        return success(leave_to_api(service.approve(request_id, admin_note=note)))

    @bp.route("/<int:request_id>/reject", methods=["POST"], endpoint="reject")
    @json_endpoint
    def reject_leave(request_id: int):
        note = request_payload().get("admin_note", "")
        return success(leave_to_api(service.reject(request_id, admin_note=note)))

    app.register_blueprint(bp)
