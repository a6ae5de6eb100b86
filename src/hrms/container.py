from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.model import WorkRules
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .common.datetime_utils import parse_hhmm
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_WORKING_DAYS_PER_MONTH
from .database.connection import DatabaseConnection, DBConfig
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leave.memory_leave_repository import InMemoryLeaveRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.repository import LeaveRepository
from .leave.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.memory_payroll_repository import InMemoryPayrollRepository
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .reports.service import ReportService

STORAGE_BACKENDS = ("memory", "mysql")


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    leave_repo: LeaveRepository
    payroll_repo: PayrollRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService
    report_service: ReportService


def build_container(
    *,
    backend: str = "memory",
    db_config: Optional[dict] = None,
    workday_start: str = "09:00",
    workday_end: str = "18:00",
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH,
) -> Container:
    backend = (backend or "memory").strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")

    conn = None
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        employees_repo = MySQLEmployeeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        leave_repo = MySQLLeaveRepository(conn)
        payroll_repo = MySQLPayrollRepository(conn)
    else:
        employees_repo = InMemoryEmployeeRepository()
        attendance_repo = InMemoryAttendanceRepository()
        leave_repo = InMemoryLeaveRepository()
        payroll_repo = InMemoryPayrollRepository()

    rules = WorkRules(
        workday_start=parse_hhmm(workday_start, "WORKDAY_START"),
        workday_end=parse_hhmm(workday_end, "WORKDAY_END"),
        grace_minutes=int(grace_minutes),
    )

    auth_service = AuthService(employees_repo)
    employee_service = EmployeeService(employees_repo, owned_records=(attendance_repo, leave_repo, payroll_repo))
    attendance_service = AttendanceService(attendance_repo, employees_repo, rules=rules)
    leave_service = LeaveService(leave_repo, employees_repo)
    payroll_service = PayrollService(
        payroll_repo,
        employees_repo,
        leave_service,
        calculator=StandardPayrollCalculator(working_days_per_month),
    )
    report_service = ReportService(employees_repo, attendance_repo, leave_repo, payroll_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        payroll_repo=payroll_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        report_service=report_service,
    )
