from __future__ import annotations

import threading
from datetime import date, datetime

import pytest

from hrms.core.enums import LeaveType, RequestStatus
from hrms.core.exceptions import ConflictError, NotFoundError, ValidationError
from hrms.leave.memory_leave_repository import InMemoryLeaveRepository


def _request(services, employee, start, end, leave_type="ANNUAL", reason="Family trip"):
    return services.leave_service.create(
        employee_id=employee.employee_id,
        start_date=start,
        end_date=end,
        leave_type=leave_type,
        reason=reason,
    )


def test_new_request_is_pending_and_counts_both_ends(services, employee):
    req = _request(services, employee, date(2025, 3, 10), date(2025, 3, 12), leave_type="sick")

    assert req.status == RequestStatus.PENDING
    assert req.leave_type == LeaveType.SICK
    assert req.days == 3


def test_invalid_requests_are_rejected(services, employee):
    with pytest.raises(ValidationError):
        _request(services, employee, date(2025, 3, 12), date(2025, 3, 10))
    with pytest.raises(ValidationError):
        _request(services, employee, date(2025, 3, 10), date(2025, 3, 10), leave_type="SABBATICAL")
    with pytest.raises(ValidationError):
        _request(services, employee, date(2025, 3, 10), date(2025, 3, 10), reason="   ")
    with pytest.raises(NotFoundError):
        services.leave_service.create(
            employee_id=999, start_date=date(2025, 3, 10), end_date=date(2025, 3, 10), leave_type="ANNUAL", reason="x"
        )


def test_overlap_with_open_request_is_a_conflict(services, employee):
    first = _request(services, employee, date(2025, 3, 10), date(2025, 3, 12))

    with pytest.raises(ConflictError):
        _request(services, employee, date(2025, 3, 12), date(2025, 3, 14))

    services.leave_service.reject(first.request_id, admin_note="busy week")
    again = _request(services, employee, date(2025, 3, 12), date(2025, 3, 14))
    assert again.status == RequestStatus.PENDING


def test_only_pending_requests_can_be_decided(services, employee):
    req = _request(services, employee, date(2025, 3, 10), date(2025, 3, 10))

    approved = services.leave_service.approve(req.request_id, admin_note=" ok ")
    assert approved.status == RequestStatus.APPROVED
    assert approved.admin_note == "ok"
    assert approved.decided_at is not None

    with pytest.raises(ValidationError, match="already been decided"):
        services.leave_service.reject(req.request_id)


def test_approved_days_in_range_clips_and_filters_type(services, employee):
    svc = services.leave_service
    unpaid = _request(services, employee, date(2025, 3, 30), date(2025, 4, 2), leave_type="UNPAID")
    annual = _request(services, employee, date(2025, 3, 5), date(2025, 3, 6))
    svc.approve(unpaid.request_id)
    svc.approve(annual.request_id)

    march = (date(2025, 3, 1), date(2025, 3, 31))
    assert svc.approved_days_in_range(employee.employee_id, *march) == 4
    assert svc.approved_days_in_range(employee.employee_id, *march, leave_type=LeaveType.UNPAID) == 2


def test_repository_refuses_overlapping_open_request():
    repo = InMemoryLeaveRepository()
    kwargs = dict(employee_id=1, leave_type=LeaveType.ANNUAL, reason="x", created_at=datetime(2025, 3, 1, 10, 0))

    first = repo.create(start_date=date(2025, 3, 10), end_date=date(2025, 3, 12), **kwargs)
    with pytest.raises(ConflictError, match=f"Overlaps leave request {first}"):
        repo.create(start_date=date(2025, 3, 12), end_date=date(2025, 3, 13), **kwargs)

    # another employee is unaffected
    repo.create(start_date=date(2025, 3, 10), end_date=date(2025, 3, 12), **{**kwargs, "employee_id": 2})


def test_concurrent_overlapping_requests_keep_one(services, employee):
    barrier = threading.Barrier(2)
    outcomes: list[str] = []

    def worker():
        barrier.wait()
        try:
            _request(services, employee, date(2025, 3, 10), date(2025, 3, 12))
            outcomes.append("created")
        except ConflictError:
            outcomes.append("refused")

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["created", "refused"]
    assert len(services.leave_service.list(employee_id=employee.employee_id)) == 1
