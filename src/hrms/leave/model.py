from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    leave_type: LeaveType
    reason: str
    status: RequestStatus
    created_at: datetime
    decided_at: Optional[datetime] = None
    admin_note: Optional[str] = None

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def overlaps(self, start: date, end: date) -> bool:
        return self.start_date <= end and start <= self.end_date
