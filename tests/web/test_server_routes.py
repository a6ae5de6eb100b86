from __future__ import annotations

import hrms.settings.testing as testing_settings
from hrms.main import create_app


def test_health_returns_literal_payload(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "message": "HRMS API is running"}


def test_root_serves_index_html(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    assert b"Dhruv HRMS" in resp.data


def test_unknown_non_api_paths_fall_back_to_index(client):
    index = client.get("/").data

    for path in ("/dashboard", "/employees/42/profile", "/leave"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.data == index


def test_existing_static_file_is_served_as_is(client):
    resp = client.get("/style.css")

    assert resp.status_code == 200
    assert resp.mimetype == "text/css"
    assert b".topbar" in resp.data


def test_unknown_api_path_is_json_404(client):
    resp = client.get("/api/does-not-exist")

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["success"] is False
    assert "/api/does-not-exist" in body["message"]


def test_script_is_rendered_with_auth_keys(client):
    resp = client.get("/script.js")

    assert resp.status_code == 200
    assert resp.mimetype == "application/javascript"
    text = resp.get_data(as_text=True)
    assert "Dhruv HRMS initialized" in text
    assert '"simulated-token"' in text
    for key in ("authToken", "userEmail", "isAdmin", "employeeId", "userRole"):
        assert f'"{key}"' in text
    assert "feather.replace()" in text
    assert "function setAuthToken" in text
    assert "function clearAuth" in text


def test_cors_allows_any_origin(client):
    resp = client.get("/api/health", headers={"Origin": "http://elsewhere.test"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "*"


def test_static_dir_can_be_overridden(tmp_path, monkeypatch):
    (tmp_path / "index.html").write_text("<html>custom shell</html>", encoding="utf-8")
    monkeypatch.setattr(testing_settings, "STATIC_DIR", str(tmp_path))

    client = create_app("hrms.settings.testing").test_client()

    resp = client.get("/anything")
    assert resp.status_code == 200
    assert b"custom shell" in resp.data


def test_cors_preflight_lists_methods_and_headers(client):
    resp = client.options(
        "/api/employees",
        headers={
            "Origin": "http://elsewhere.test",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "Content-Type, Authorization",
        },
    )

    assert resp.status_code == 200
    assert resp.headers.get("Access-Control-Allow-Origin") == "*"
    methods = {m.strip() for m in resp.headers["Access-Control-Allow-Methods"].split(",")}
    assert methods == {"GET", "POST", "PUT", "DELETE", "OPTIONS"}
    allowed = {h.strip().lower() for h in resp.headers["Access-Control-Allow-Headers"].split(",")}
    assert allowed == {"content-type", "authorization"}
