from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local, overlap_days
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveType, RequestStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def parse_leave_type(value: Any) -> LeaveType:
    try:
        return LeaveType(str(value or "").strip().upper())
    except ValueError:
        raise ValidationError(f"Unknown leave type: {value}")


def parse_request_status(value: Any) -> RequestStatus:
    try:
        return RequestStatus(str(value or "").strip().upper())
    except ValueError:
        raise ValidationError(f"Unknown request status: {value}")


def leave_to_api(r: LeaveRequest) -> dict:
    return {
        "request_id": r.request_id,
        "employee_id": r.employee_id,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "days": r.days,
        "leave_type": r.leave_type.value,
        "reason": r.reason,
        "status": r.status.value,
        "created_at": r.created_at.isoformat(timespec="seconds"),
        "decided_at": r.decided_at.isoformat(timespec="seconds") if r.decided_at else None,
        "admin_note": r.admin_note,
    }


class LeaveService:
    def __init__(self, requests: LeaveRepository, employees: EmployeeRepository):
        self._requests = requests
        self._employees = employees

    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: Any,
        reason: str,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        if not employee.is_active:
            raise ValidationError("Employee is not active")

        if end_date < start_date:
            raise ValidationError("End date must not be before start date")

        leave_type = parse_leave_type(leave_type)
        reason = require_non_empty(reason, "Reason")

        request_id = self._requests.create(
            employee_id=employee.employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=leave_type,
            reason=reason,
            created_at=now or now_local(),
        )
        logger.info("Leave request %s created for employee %s", request_id, employee.employee_id)
        return self.get(request_id)

    def get(self, request_id: int) -> LeaveRequest:
        req = self._requests.get(int(request_id))
        if not req:
            raise NotFoundError(f"Leave request {request_id} not found")
        return req

    def list(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[LeaveRequest]:
        return self._requests.list_requests(status=status, employee_id=employee_id, limit=limit)

    def approve(self, request_id: int, *, admin_note: str = "", now: Optional[datetime] = None) -> LeaveRequest:
        return self._decide(request_id, RequestStatus.APPROVED, admin_note=admin_note, now=now)

    def reject(self, request_id: int, *, admin_note: str = "", now: Optional[datetime] = None) -> LeaveRequest:
        return self._decide(request_id, RequestStatus.REJECTED, admin_note=admin_note, now=now)

    def _decide(self, request_id: int, status: RequestStatus, *, admin_note: str, now: Optional[datetime]) -> LeaveRequest:
        req = self.get(request_id)
        if req.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been decided")

        decided = self._requests.decide(
            request_id=req.request_id,
            status=status,
            decided_at=now or now_local(),
            admin_note=(admin_note or "").strip() or None,
        )
        if not decided:
            raise ValidationError("Leave request has already been decided")
        logger.info("Leave request %s %s", req.request_id, status.value.lower())
        return self.get(req.request_id)

    def approved_days_in_range(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        leave_type: Optional[LeaveType] = None,
    ) -> int:
        total = 0
        for r in self._requests.list_requests(status=RequestStatus.APPROVED, employee_id=int(employee_id), limit=10_000):
            if leave_type is not None and r.leave_type != leave_type:
                continue
            total += overlap_days(r.start_date, r.end_date, start, end)
        return total
