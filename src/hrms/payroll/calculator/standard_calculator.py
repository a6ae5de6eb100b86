from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import DEFAULT_WORKING_DAYS_PER_MONTH
from ..model import PayrollBreakdown
from .base import PayrollCalculator

_CENTS = Decimal("0.01")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base + allowances - deductions - base / working days * unpaid days, not below 0."""

    def __init__(self, working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH):
        if int(working_days_per_month) <= 0:
            raise ValueError("working_days_per_month must be positive")
        self._working_days = int(working_days_per_month)

    def leave_deduction(self, base_salary: Decimal, unpaid_leave_days: int) -> Decimal:
        # Rounded once, after multiplying.
        exact = Decimal(base_salary) * unpaid_leave_days / self._working_days
        return exact.quantize(_CENTS, rounding=ROUND_HALF_UP)

    def calculate(
        self,
        *,
        base_salary: Decimal,
        allowances: Decimal,
        deductions: Decimal,
        unpaid_leave_days: int,
    ) -> PayrollBreakdown:
        unpaid_leave_days = max(int(unpaid_leave_days), 0)
        leave_deduction = self.leave_deduction(base_salary, unpaid_leave_days)
        total_deductions = (Decimal(deductions) + leave_deduction).quantize(_CENTS)

        net = Decimal(base_salary) + Decimal(allowances) - total_deductions
        return PayrollBreakdown(
            base_salary=Decimal(base_salary).quantize(_CENTS),
            allowances=Decimal(allowances).quantize(_CENTS),
            deductions=total_deductions,
            unpaid_leave_days=unpaid_leave_days,
            net_pay=max(net, Decimal("0")).quantize(_CENTS),
        )
