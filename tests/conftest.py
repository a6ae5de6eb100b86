from __future__ import annotations

from datetime import date

import pytest

from hrms.container import build_container
from hrms.main import create_app


@pytest.fixture()
def app():
    return create_app("hrms.settings.testing")


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def container(app):
    return app.extensions["hrms_container"]


@pytest.fixture()
def services():
    """A standalone in-memory container (09:00-18:00, 5 min grace, 22 working days)."""
    return build_container()


@pytest.fixture()
def employee(services):
    return services.employee_service.create(
        full_name="Arjun Mehta",
        email="arjun@example.com",
        department="Engineering",
        position="Engineer",
        role="employee",
        base_salary="22000",
        hire_date=date(2024, 7, 15),
    )
