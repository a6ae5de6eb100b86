from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Optional, Sequence

from .model import PayrollBreakdown, PayrollRecord
from .repository import PayrollRepository


class InMemoryPayrollRepository(PayrollRepository):
    def __init__(self):
        self._lock = Lock()
        self._rows: dict[int, PayrollRecord] = {}
        self._next_id = 1

    def upsert(self, *, employee_id: int, period: str, breakdown: PayrollBreakdown, generated_at: datetime) -> int:
        with self._lock:
            payroll_id = None
            for r in self._rows.values():
                if r.employee_id == int(employee_id) and r.period == period:
                    payroll_id = r.payroll_id
                    break
            if payroll_id is None:
                payroll_id = self._next_id
                self._next_id += 1

            self._rows[payroll_id] = PayrollRecord(
                payroll_id=payroll_id,
                employee_id=int(employee_id),
                period=period,
                base_salary=breakdown.base_salary,
                allowances=breakdown.allowances,
                deductions=breakdown.deductions,
                unpaid_leave_days=breakdown.unpaid_leave_days,
                net_pay=breakdown.net_pay,
                generated_at=generated_at,
            )
            return payroll_id

    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        with self._lock:
            return self._rows.get(int(payroll_id))

    def list_records(
        self,
        *,
        period: Optional[str] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[PayrollRecord]:
        with self._lock:
            rows = list(self._rows.values())
        if period:
            rows = [r for r in rows if r.period == period]
        if employee_id is not None:
            rows = [r for r in rows if r.employee_id == int(employee_id)]
        rows.sort(key=lambda r: (r.period, r.employee_id), reverse=True)
        return rows[: int(limit)]

    def delete_for_employee(self, employee_id: int) -> int:
        with self._lock:
            doomed = [k for k, r in self._rows.items() if r.employee_id == int(employee_id)]
            for k in doomed:
                del self._rows[k]
            return len(doomed)
