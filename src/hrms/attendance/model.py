from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one work date."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    note: Optional[str] = None

    @property
    def worked_minutes(self) -> int:
        if not self.check_out_time:
            return 0
        return max(int((self.check_out_time - self.check_in_time).total_seconds() // 60), 0)


@dataclass(frozen=True)
class WorkRules:
    """Office hours used to classify check-ins and check-outs."""

    workday_start: time
    workday_end: time
    grace_minutes: int = 5
