"""JSON response helpers shared by the ``/api`` controllers."""

from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import current_app, jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

ERROR_STATUS = {
    ValidationError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    ConflictError: 409,
}


def success(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def failure(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    for exc_type, status in ERROR_STATUS.items():
        if isinstance(error, exc_type):
            return status
    return 400


def json_endpoint(view):
    """Translate domain errors into JSON failures; log anything else as a 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return failure(str(e), status_for(e))
        except Exception:
            current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
            return failure("Internal server error", 500)

    return wrapper


def request_payload() -> dict:
    """Body as a dict, accepting both JSON and URL-encoded forms."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def arg(name: str) -> Optional[str]:
    value = request.args.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()
