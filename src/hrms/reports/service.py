from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import normalize_period, now_local
from ..common.validators import format_money
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import AttendanceStatus, RequestStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..leave.repository import LeaveRepository
from ..payroll.repository import PayrollRepository

# Report queries are unbounded within their date range.
_ALL = 100_000


def _hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def default_range(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    end = end or now_local().date()
    start = start or end - timedelta(days=DEFAULT_REPORT_DAYS - 1)
    if end < start:
        raise ValidationError("End date must not be before start date")
    return start, end


class ReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leave: LeaveRepository,
        payroll: PayrollRepository,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leave = leave
        self._payroll = payroll

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
        department: Optional[str] = None,
    ) -> ReportData:
        directory = {e.employee_id: e for e in self._employees.list_all(include_inactive=True)}
        records = self._attendance.list_records(employee_id=employee_id, start_date=start, end_date=end, limit=_ALL)

        summary_map: dict[int, dict] = {}
        out_rows: list[dict] = []

        for r in sorted(records, key=lambda x: (x.work_date, x.employee_id)):
            e = directory.get(r.employee_id)
            dept = e.department if e else None
            if department and (dept or "").lower() != department.lower():
                continue

            minutes = r.worked_minutes
            out_rows.append(
                {
                    "work_date": r.work_date.isoformat(),
                    "employee_id": r.employee_id,
                    "full_name": e.full_name if e else "-",
                    "email": e.email if e else "-",
                    "department": dept or "-",
                    "check_in": r.check_in_time.strftime("%H:%M"),
                    "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "-",
                    "status": r.status.value,
                    "worked_hours": _hhmm(minutes),
                    "note": r.note or "",
                }
            )

            s = summary_map.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "full_name": e.full_name if e else "-",
                    "days_present": 0,
                    "late_days": 0,
                    "total_minutes": 0,
                }
                summary_map[r.employee_id] = s
            s["days_present"] += 1
            s["total_minutes"] += minutes
            if r.status == AttendanceStatus.LATE:
                s["late_days"] += 1

        summary = sorted(summary_map.values(), key=lambda x: x["total_minutes"], reverse=True)
        for s in summary:
            s["total_hours"] = _hhmm(int(s.pop("total_minutes")))
        return ReportData(rows=out_rows, summary=summary)

    def summary(self, *, start: date, end: date, period: Optional[str] = None) -> dict:
        employees = list(self._employees.list_all(include_inactive=True))
        active = [e for e in employees if e.is_active]
        by_department = Counter((e.department or "Unassigned") for e in active)

        records = self._attendance.list_records(start_date=start, end_date=end, limit=_ALL)
        attendance_counts = {s.value: 0 for s in AttendanceStatus}
        for r in records:
            attendance_counts[r.status.value] += 1

        leave_counts = {s.value: 0 for s in RequestStatus}
        for req in self._leave.list_requests(limit=_ALL):
            if req.overlaps(start, end):
                leave_counts[req.status.value] += 1

        period = normalize_period(period or now_local().strftime("%Y-%m"))
        payroll_rows = self._payroll.list_records(period=period, limit=_ALL)

        return {
            "range": {"start": start.isoformat(), "end": end.isoformat()},
            "headcount": {
                "total": len(employees),
                "active": len(active),
                "inactive": len(employees) - len(active),
                "by_department": dict(sorted(by_department.items())),
            },
            "attendance": attendance_counts,
            "leave": leave_counts,
            "payroll": {
                "period": period,
                "records": len(payroll_rows),
                "total_base_salary": format_money(sum((p.base_salary for p in payroll_rows), Decimal("0"))),
                "total_net_pay": format_money(sum((p.net_pay for p in payroll_rows), Decimal("0"))),
            },
        }
