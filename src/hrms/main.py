from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .container import build_container
from .core.constants import HEALTH_PAYLOAD
from .core.log import configure_logging
from .database.bootstrap import apply_schema, list_tables
from .demo import seed_demo_employees
from .employees.controller import register as register_employees
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .settings import get_settings_module
from .web.controller import register as register_web

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def _cors_origins(value) -> str | list[str]:
    if not value or str(value).strip() == "*":
        return "*"
    return [o.strip() for o in str(value).split(",") if o.strip()]


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__, static_folder=None, template_folder="web/templates")
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", "0.0.0.0")
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))
    app.config["STORAGE_BACKEND"] = getattr(settings, "STORAGE_BACKEND", "memory")

    CORS(
        app,
        resources={r"/*": {"origins": _cors_origins(getattr(settings, "CORS_ORIGINS", "*"))}},
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    container = build_container(
        backend=app.config["STORAGE_BACKEND"],
        db_config=dict(getattr(settings, "DB_CONFIG", {})),
        workday_start=getattr(settings, "WORKDAY_START", "09:00"),
        workday_end=getattr(settings, "WORKDAY_END", "18:00"),
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", 5)),
        working_days_per_month=int(getattr(settings, "WORKING_DAYS_PER_MONTH", 22)),
    )

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        app.logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))

    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_employees(container)

    app.extensions["hrms_container"] = container
    app.logger.debug("Settings %s, storage backend %s", settings_module, app.config["STORAGE_BACKEND"])

    # API routes must be registered before the catch-all page route.
    register_auth(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_leave(app, container)
    register_payroll(app, container)
    register_reports(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify(HEALTH_PAYLOAD)

    register_web(app, static_dir=getattr(settings, "STATIC_DIR", None))

    return app
