from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import normalize_period, now_local, parse_period
from ..common.validators import format_money, parse_money
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..leave.service import LeaveService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord
from .repository import PayrollRepository

logger = logging.getLogger(__name__)

_ZERO = Decimal("0.00")


def payroll_to_api(r: PayrollRecord) -> dict:
    return {
        "payroll_id": r.payroll_id,
        "employee_id": r.employee_id,
        "period": r.period,
        "base_salary": format_money(r.base_salary),
        "allowances": format_money(r.allowances),
        "deductions": format_money(r.deductions),
        "unpaid_leave_days": r.unpaid_leave_days,
        "net_pay": format_money(r.net_pay),
        "generated_at": r.generated_at.isoformat(timespec="seconds"),
    }


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        leave: LeaveService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._leave = leave
        self._calculator = calculator or StandardPayrollCalculator()

    def generate(
        self,
        *,
        period: str,
        employee_id: Optional[int] = None,
        allowances: Any = None,
        deductions: Any = None,
        now: Optional[datetime] = None,
    ) -> Sequence[PayrollRecord]:
        """Compute payroll for one employee or every active one; re-running replaces the period."""
        period = normalize_period(period)
        first, last = parse_period(period)
        allowances = parse_money(allowances, "Allowances", default=_ZERO)
        deductions = parse_money(deductions, "Deductions", default=_ZERO)

        if employee_id is not None:
            employee = self._employees.get_by_id(int(employee_id))
            if not employee:
                raise NotFoundError(f"Employee {employee_id} not found")
            if not employee.is_active:
                raise ValidationError("Employee is not active")
            targets = [employee]
        else:
            targets = list(self._employees.list_all())

        generated_at = now or now_local()
        out: list[PayrollRecord] = []
        for e in targets:
            unpaid = self._leave.approved_days_in_range(e.employee_id, first, last, leave_type=LeaveType.UNPAID)
            breakdown = self._calculator.calculate(
                base_salary=e.base_salary,
                allowances=allowances,
                deductions=deductions,
                unpaid_leave_days=unpaid,
            )
            payroll_id = self._payroll.upsert(
                employee_id=e.employee_id,
                period=period,
                breakdown=breakdown,
                generated_at=generated_at,
            )
            out.append(self.get(payroll_id))

        logger.info("Generated payroll for %s: %d record(s)", period, len(out))
        return out

    def get(self, payroll_id: int) -> PayrollRecord:
        record = self._payroll.get(int(payroll_id))
        if not record:
            raise NotFoundError(f"Payroll record {payroll_id} not found")
        return record

    def list(
        self,
        *,
        period: Optional[str] = None,
        employee_id: Optional[int] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[PayrollRecord]:
        if period:
            period = normalize_period(period)
        return self._payroll.list_records(period=period, employee_id=employee_id, limit=limit)
