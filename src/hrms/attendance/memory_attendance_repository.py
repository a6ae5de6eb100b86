from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from threading import Lock
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import ALREADY_CHECKED_IN, AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._lock = Lock()
        self._rows: dict[int, AttendanceRecord] = {}
        self._next_id = 1

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with self._lock:
            return self._rows.get(int(attendance_id))

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with self._lock:
            for r in self._rows.values():
                if r.employee_id == int(employee_id) and r.work_date == work_date:
                    return r
        return None

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 200,
    ) -> Sequence[AttendanceRecord]:
        with self._lock:
            rows = list(self._rows.values())
        if employee_id is not None:
            rows = [r for r in rows if r.employee_id == int(employee_id)]
        if start_date:
            rows = [r for r in rows if r.work_date >= start_date]
        if end_date:
            rows = [r for r in rows if r.work_date <= end_date]
        rows.sort(key=lambda r: (r.work_date, r.check_in_time), reverse=True)
        return rows[: int(limit)]

    def create_checkin(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> int:
        with self._lock:
            for r in self._rows.values():
                if r.employee_id == int(employee_id) and r.work_date == work_date:
                    raise ValidationError(ALREADY_CHECKED_IN)
            attendance_id = self._next_id
            self._next_id += 1
            self._rows[attendance_id] = AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=int(employee_id),
                work_date=work_date,
                check_in_time=check_in_time,
                check_out_time=None,
                status=status,
                note=note,
            )
            return attendance_id

    def update_record(
        self,
        *,
        attendance_id: int,
        check_in_time: datetime,
        check_out_time: Optional[datetime],
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> bool:
        with self._lock:
            current = self._rows.get(int(attendance_id))
            if not current:
                return False
            self._rows[current.attendance_id] = replace(
                current,
                check_in_time=check_in_time,
                check_out_time=check_out_time,
                status=status,
                note=note,
            )
            return True

    def delete_for_employee(self, employee_id: int) -> int:
        with self._lock:
            doomed = [k for k, r in self._rows.items() if r.employee_id == int(employee_id)]
            for k in doomed:
                del self._rows[k]
            return len(doomed)
