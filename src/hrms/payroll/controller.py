from __future__ import annotations

from flask import Blueprint, Flask

from ..common.http import arg, json_endpoint, request_payload, success
from ..common.validators import parse_positive_int
from ..container import Container
from .service import payroll_to_api


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("payroll", __name__, url_prefix="/api/payroll")
    service = container.payroll_service

    @bp.route("/generate", methods=["POST"], endpoint="generate")
    @json_endpoint
    def generate():
        data = request_payload()
        employee_id = data.get("employee_id")
        records = service.generate(
            period=data.get("period", ""),
            employee_id=parse_positive_int(employee_id, "employee_id") if employee_id not in (None, "") else None,
            allowances=data.get("allowances"),
            deductions=data.get("deductions"),
        )
        return success([payroll_to_api(r) for r in records], 201)

    @bp.route("", methods=["GET"], endpoint="list")
    @json_endpoint
    def list_payroll():
        employee_id = arg("employee_id")
        rows = service.list(
            period=arg("period"),
            employee_id=parse_positive_int(employee_id, "employee_id") if employee_id else None,
        )
        return success([payroll_to_api(r) for r in rows])

    @bp.route("/<int:payroll_id>", methods=["GET"], endpoint="get")
    @json_endpoint
    def get_payroll(payroll_id: int):
        return success(payroll_to_api(service.get(payroll_id)))

    app.register_blueprint(bp)
