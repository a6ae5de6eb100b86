from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PayrollBreakdown:
    """Result of a payroll calculation, before it is persisted."""

    base_salary: Decimal
    allowances: Decimal
    deductions: Decimal
    unpaid_leave_days: int
    net_pay: Decimal


@dataclass(frozen=True)
class PayrollRecord:
    payroll_id: int
    employee_id: int
    period: str
    base_salary: Decimal
    allowances: Decimal
    deductions: Decimal
    unpaid_leave_days: int
    net_pay: Decimal
    generated_at: datetime
