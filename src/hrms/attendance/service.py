from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, WorkRules
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def attendance_to_api(r: AttendanceRecord) -> dict:
    minutes = r.worked_minutes
    return {
        "attendance_id": r.attendance_id,
        "employee_id": r.employee_id,
        "work_date": r.work_date.isoformat(),
        "check_in_time": r.check_in_time.isoformat(timespec="seconds"),
        "check_out_time": r.check_out_time.isoformat(timespec="seconds") if r.check_out_time else None,
        "status": r.status.value,
        "worked_hours": f"{minutes // 60:02d}:{minutes % 60:02d}",
        "note": r.note,
    }


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository, *, rules: WorkRules):
        self._attendance = attendance
        self._employees = employees
        self._rules = rules

    def status_for_checkin(self, check_in: datetime) -> AttendanceStatus:
        shift_start = datetime.combine(check_in.date(), self._rules.workday_start)
        if check_in <= shift_start + timedelta(minutes=int(self._rules.grace_minutes)):
            return AttendanceStatus.ON_TIME
        return AttendanceStatus.LATE

    def status_for_checkout(self, check_out: datetime, current: AttendanceStatus) -> AttendanceStatus:
        # Only an on-time arrival can be downgraded; LATE stays LATE.
        shift_end = datetime.combine(check_out.date(), self._rules.workday_end)
        if check_out < shift_end and current == AttendanceStatus.ON_TIME:
            return AttendanceStatus.EARLY_LEAVE
        return current

    def _require_active_employee(self, employee_id: int):
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        if not employee.is_active:
            raise ValidationError("Employee is not active")
        return employee

    def check_in(self, employee_id: int, *, now: Optional[datetime] = None, note: Optional[str] = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        self._require_active_employee(employee_id)

        attendance_id = self._attendance.create_checkin(
            employee_id=int(employee_id),
            work_date=today,
            check_in_time=now,
            status=self.status_for_checkin(now),
            note=(note or "").strip() or None,
        )
        logger.info("Employee %s checked in at %s", employee_id, now.isoformat(timespec="seconds"))
        return self._get(attendance_id)

    def check_out(self, employee_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_local()

        record = self._attendance.get_for_employee_and_date(int(employee_id), now.date())
        if not record:
            raise ValidationError("No check-in recorded today")
        if record.check_out_time is not None:
            raise ValidationError("Already checked out today")

        self._attendance.update_record(
            attendance_id=record.attendance_id,
            check_in_time=record.check_in_time,
            check_out_time=now,
            status=self.status_for_checkout(now, record.status),
            note=record.note,
        )
        logger.info("Employee %s checked out at %s", employee_id, now.isoformat(timespec="seconds"))
        return self._get(record.attendance_id)

    def correct(
        self,
        attendance_id: int,
        *,
        check_in_time: Any = None,
        check_out_time: Any = None,
        note: Any = None,
    ) -> AttendanceRecord:
        """Admin correction; the status is re-derived from the corrected times."""
        record = self._get(attendance_id)

        new_in = parse_iso_datetime(check_in_time, "Check-in time") if check_in_time else record.check_in_time
        new_out = parse_iso_datetime(check_out_time, "Check-out time") if check_out_time else record.check_out_time
        if new_in.date() != record.work_date:
            raise ValidationError("Check-in must stay on the record's work date")
        if new_out and new_out < new_in:
            raise ValidationError("Check-out cannot be earlier than check-in")

        status = self.status_for_checkin(new_in)
        if new_out:
            status = self.status_for_checkout(new_out, status)

        self._attendance.update_record(
            attendance_id=record.attendance_id,
            check_in_time=new_in,
            check_out_time=new_out,
            status=status,
            note=record.note if note is None else (str(note).strip() or None),
        )
        return self._get(record.attendance_id)

    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[AttendanceRecord]:
        if start and end and end < start:
            raise ValidationError("End date must not be before start date")
        return self._attendance.list_records(employee_id=employee_id, start_date=start, end_date=end, limit=limit)

    def get_today_record(self, employee_id: int, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(int(employee_id), today or now_local().date())

    def _get(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(attendance_id))
        if not record:
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        return record
