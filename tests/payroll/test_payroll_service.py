from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from hrms.core.exceptions import NotFoundError, ValidationError


def _approved_leave(services, employee, start, end, leave_type):
    req = services.leave_service.create(
        employee_id=employee.employee_id, start_date=start, end_date=end, leave_type=leave_type, reason="personal"
    )
    services.leave_service.approve(req.request_id)


def test_only_unpaid_leave_inside_period_is_deducted(services, employee):
    _approved_leave(services, employee, date(2025, 3, 30), date(2025, 4, 2), "UNPAID")
    _approved_leave(services, employee, date(2025, 3, 10), date(2025, 3, 11), "ANNUAL")

    [record] = services.payroll_service.generate(period="2025-03", employee_id=employee.employee_id)

    assert record.unpaid_leave_days == 2
    assert record.net_pay == Decimal("20000.00")


def test_regenerating_a_period_replaces_the_record(services, employee):
    svc = services.payroll_service
    first = svc.generate(period="2025-03", employee_id=employee.employee_id)[0]
    second = svc.generate(period="2025-03", employee_id=employee.employee_id, allowances="1500")[0]

    rows = svc.list(period="2025-03")
    assert len(rows) == 1
    assert second.payroll_id == first.payroll_id
    assert rows[0].allowances == Decimal("1500.00")
    assert rows[0].net_pay == Decimal("23500.00")


def test_generate_all_covers_active_employees_only(services, employee):
    leaver = services.employee_service.create(full_name="Leaver", email="leaver@example.com", base_salary="30000")
    services.employee_service.deactivate(leaver.employee_id)

    records = services.payroll_service.generate(period="2025-04")

    assert [r.employee_id for r in records] == [employee.employee_id]


def test_bad_input_is_rejected(services, employee):
    svc = services.payroll_service
    with pytest.raises(ValidationError):
        svc.generate(period="March 2025")
    with pytest.raises(ValidationError):
        svc.generate(period="2025-03", deductions="-10")
    with pytest.raises(NotFoundError):
        svc.generate(period="2025-03", employee_id=999)


def test_unpadded_period_cannot_create_a_second_record(services, employee):
    svc = services.payroll_service
    svc.generate(period="2025-03", employee_id=employee.employee_id)

    with pytest.raises(ValidationError, match="YYYY-MM"):
        svc.generate(period="2025-3", employee_id=employee.employee_id)

    assert len(svc.list(employee_id=employee.employee_id)) == 1


def test_period_whitespace_is_stripped_before_storage(services, employee):
    [record] = services.payroll_service.generate(period=" 2025-03 ", employee_id=employee.employee_id)

    assert record.period == "2025-03"
    assert len(services.payroll_service.list(period="2025-03")) == 1
