from __future__ import annotations

from flask import Blueprint, Flask

from ..common.http import json_endpoint, request_payload, success
from ..container import Container


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("auth", __name__, url_prefix="/api/auth")
    service = container.auth_service

    @bp.route("/login", methods=["POST"], endpoint="login")
    @json_endpoint
    def login():
        data = request_payload()
        user = service.login(data.get("email", ""))
        app.logger.info("Simulated login for employee %s", user.employee_id)
        return success({"user": user.to_api(), "storage": service.storage_flags(user)})

    @bp.route("/logout", methods=["POST"], endpoint="logout")
    @json_endpoint
    def logout():
        return success({"clear": service.logout_keys()})

    app.register_blueprint(bp)
