from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveType, RequestStatus
from ..core.exceptions import ConflictError
from .model import LeaveRequest

# Requests that still hold their dates.
OPEN_STATUSES = (RequestStatus.PENDING, RequestStatus.APPROVED)


def overlap_conflict(existing: LeaveRequest) -> ConflictError:
    return ConflictError(
        f"Overlaps leave request {existing.request_id} "
        f"({existing.start_date.isoformat()} to {existing.end_date.isoformat()})"
    )


class LeaveRepository(Protocol):
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
        """Insert a PENDING request.

        Raises ConflictError when it overlaps an open request of the same employee;
        the check and the insert are one atomic step.
        """

        raise NotImplementedError

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        """Newest first."""

        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        """Move a PENDING request to a final status; False if it was not pending."""

        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
