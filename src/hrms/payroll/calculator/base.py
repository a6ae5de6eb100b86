from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import PayrollBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        *,
        base_salary: Decimal,
        allowances: Decimal,
        deductions: Decimal,
        unpaid_leave_days: int,
    ) -> PayrollBreakdown:
        raise NotImplementedError
