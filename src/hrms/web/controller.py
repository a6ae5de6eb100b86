from __future__ import annotations

from pathlib import Path

from flask import Flask, abort, jsonify, render_template, request, send_from_directory
from werkzeug.exceptions import HTTPException
from werkzeug.security import safe_join

from .auth_flags import AUTH_STORAGE_KEYS, AUTH_TOKEN_KEY, PROTECTED_PAGES, SIMULATED_TOKEN, UNGATED_PAGE

STATIC_DIR = Path(__file__).resolve().parent / "static"
INDEX_FILE = "index.html"
API_PREFIX = "/api"


def is_api_path(path: str) -> bool:
    return path.startswith(API_PREFIX)


def register(app: Flask, *, static_dir: Path | str | None = None) -> None:
    root = Path(static_dir or STATIC_DIR).resolve()

    def api_error(error: HTTPException):
        if not is_api_path(request.path):
            return error
        return jsonify({"success": False, "message": error.description}), error.code

    app.register_error_handler(HTTPException, api_error)

    @app.route("/script.js", endpoint="bootstrap_script")
    def bootstrap_script():
        body = render_template(
            "script.js",
            storage_keys=list(AUTH_STORAGE_KEYS),
            token_key=AUTH_TOKEN_KEY,
            simulated_token=SIMULATED_TOKEN,
            protected_pages=list(PROTECTED_PAGES),
            ungated_page=UNGATED_PAGE,
        )
        return app.response_class(body, mimetype="application/javascript")

    @app.route("/", defaults={"path": ""}, endpoint="spa")
    @app.route("/<path:path>", endpoint="spa")
    def spa(path: str):
        # Unmatched /api routes fall through to here and must not get the HTML shell.
        if is_api_path(request.path):
            abort(404, description=f"No API route for {request.path}")

        if path:
            candidate = safe_join(str(root), path)
            if candidate and Path(candidate).is_file():
                return send_from_directory(root, path)

        return send_from_directory(root, INDEX_FILE)
