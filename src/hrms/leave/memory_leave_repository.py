from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from threading import Lock
from typing import Optional, Sequence

from ..core.enums import LeaveType, RequestStatus
from .model import LeaveRequest
from .repository import OPEN_STATUSES, LeaveRepository, overlap_conflict


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self):
        self._lock = Lock()
        self._rows: dict[int, LeaveRequest] = {}
        self._next_id = 1

    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: str,
        created_at: datetime,
    ) -> int:
        with self._lock:
            for r in self._rows.values():
                if r.employee_id == int(employee_id) and r.status in OPEN_STATUSES and r.overlaps(start_date, end_date):
                    raise overlap_conflict(r)
            request_id = self._next_id
            self._next_id += 1
            self._rows[request_id] = LeaveRequest(
                request_id=request_id,
                employee_id=int(employee_id),
                start_date=start_date,
                end_date=end_date,
                leave_type=leave_type,
                reason=reason,
                status=RequestStatus.PENDING,
                created_at=created_at,
            )
            return request_id

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        with self._lock:
            return self._rows.get(int(request_id))

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        with self._lock:
            rows = list(self._rows.values())
        if status is not None:
            rows = [r for r in rows if r.status == status]
        if employee_id is not None:
            rows = [r for r in rows if r.employee_id == int(employee_id)]
        rows.sort(key=lambda r: (r.created_at, r.request_id), reverse=True)
        return rows[: int(limit)]

    def decide(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        with self._lock:
            current = self._rows.get(int(request_id))
            if not current or current.status != RequestStatus.PENDING:
                return False
            self._rows[current.request_id] = replace(
                current, status=status, decided_at=decided_at, admin_note=admin_note
            )
            return True

    def delete_for_employee(self, employee_id: int) -> int:
        with self._lock:
            doomed = [k for k, r in self._rows.items() if r.employee_id == int(employee_id)]
            for k in doomed:
                del self._rows[k]
            return len(doomed)
