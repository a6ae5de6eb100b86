from __future__ import annotations

from flask import Blueprint, Flask

from ..common.http import arg, json_endpoint, request_payload, success
from ..common.validators import parse_bool
from ..container import Container
from .service import employee_to_api


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("employees", __name__, url_prefix="/api/employees")
    service = container.employee_service

    @bp.route("", methods=["GET"], endpoint="list")
    @json_endpoint
    def list_employees():
        rows = service.list(department=arg("department"), include_inactive=parse_bool(arg("include_inactive")))
        return success([employee_to_api(e) for e in rows])

    @bp.route("", methods=["POST"], endpoint="create")
    @json_endpoint
    def create_employee():
        data = request_payload()
        employee = service.create(
            full_name=data.get("full_name", ""),
            email=data.get("email", ""),
            department=data.get("department"),
            position=data.get("position"),
            role=data.get("role"),
            base_salary=data.get("base_salary"),
            hire_date=data.get("hire_date"),
        )
        return success(employee_to_api(employee), 201)

    @bp.route("/<int:employee_id>", methods=["GET"], endpoint="get")
    @json_endpoint
    def get_employee(employee_id: int):
        return success(employee_to_api(service.get(employee_id)))

    @bp.route("/<int:employee_id>", methods=["PUT"], endpoint="update")
    @json_endpoint
    def update_employee(employee_id: int):
        return success(employee_to_api(service.update(employee_id, request_payload())))

    @bp.route("/<int:employee_id>/deactivate", methods=["POST"], endpoint="deactivate")
    @json_endpoint
    def deactivate_employee(employee_id: int):
        return success(employee_to_api(service.deactivate(employee_id)))

    @bp.route("/<int:employee_id>", methods=["DELETE"], endpoint="delete")
    @json_endpoint
    def delete_employee(employee_id: int):
        service.delete(employee_id)
        return success({"employee_id": employee_id})

    app.register_blueprint(bp)
