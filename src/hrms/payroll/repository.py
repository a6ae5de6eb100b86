from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PayrollBreakdown, PayrollRecord


class PayrollRepository(Protocol):
    def upsert(self, *, employee_id: int, period: str, breakdown: PayrollBreakdown, generated_at: datetime) -> int:
        """Insert or replace the record for (employee, period); returns its id."""

        raise NotImplementedError

    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_records(
        self,
        *,
        period: Optional[str] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
