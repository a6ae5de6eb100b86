from __future__ import annotations

import pytest

from hrms.core.exceptions import AuthenticationError


@pytest.fixture()
def admin(container):
    return container.employee_service.create(full_name="Dhruv Admin", email="admin@example.com", role="admin")


def test_login_returns_user_and_storage_flags(client, admin):
    resp = client.post("/api/auth/login", json={"email": "ADMIN@example.com"})

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["user"]["employee_id"] == admin.employee_id
    assert data["user"]["is_admin"] is True
    assert data["storage"] == {
        "authToken": "simulated-token",
        "userEmail": "admin@example.com",
        "isAdmin": "true",
        "employeeId": str(admin.employee_id),
        "userRole": "admin",
    }


def test_login_accepts_form_body(client, admin):
    resp = client.post("/api/auth/login", data={"email": "admin@example.com"})

    assert resp.status_code == 200
    assert resp.get_json()["success"] is True


def test_unknown_email_is_401(client):
    resp = client.post("/api/auth/login", json={"email": "nobody@example.com"})

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Unknown or inactive account"}


def test_inactive_employee_cannot_log_in(container):
    e = container.employee_service.create(full_name="Gone", email="gone@example.com")
    container.employee_service.deactivate(e.employee_id)

    with pytest.raises(AuthenticationError):
        container.auth_service.login("gone@example.com")


def test_logout_lists_every_key(client):
    resp = client.post("/api/auth/logout")

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"clear": ["authToken", "userEmail", "isAdmin", "employeeId", "userRole"]}
