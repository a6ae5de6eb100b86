from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, first_row
from .model import PayrollBreakdown, PayrollRecord
from .repository import PayrollRepository

_COLUMNS = (
    "payroll_id, employee_id, period, base_salary, allowances, deductions, unpaid_leave_days, net_pay, generated_at"
)


def _to_record(r: dict) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        period=r["period"],
        base_salary=Decimal(str(r["base_salary"])),
        allowances=Decimal(str(r["allowances"])),
        deductions=Decimal(str(r["deductions"])),
        unpaid_leave_days=int(r.get("unpaid_leave_days") or 0),
        net_pay=Decimal(str(r["net_pay"])),
        generated_at=r["generated_at"],
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, employee_id: int, period: str, breakdown: PayrollBreakdown, generated_at: datetime) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO payroll_records(employee_id, period, base_salary, allowances, deductions,
                                            unpaid_leave_days, net_pay, generated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    base_salary=VALUES(base_salary),
                    allowances=VALUES(allowances),
                    deductions=VALUES(deductions),
                    unpaid_leave_days=VALUES(unpaid_leave_days),
                    net_pay=VALUES(net_pay),
                    generated_at=VALUES(generated_at)
                """,
                (
                    int(employee_id),
                    period,
                    breakdown.base_salary,
                    breakdown.allowances,
                    breakdown.deductions,
                    breakdown.unpaid_leave_days,
                    breakdown.net_pay,
                    generated_at,
                ),
            )
            cur.execute(
                "SELECT payroll_id FROM payroll_records WHERE employee_id=%s AND period=%s",
                (int(employee_id), period),
            )
            return int(first_row(cur)["payroll_id"])

    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_records WHERE payroll_id=%s", (int(payroll_id),))
            r = first_row(cur)
            return _to_record(r) if r else None

    def list_records(
        self,
        *,
        period: Optional[str] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[PayrollRecord]:
        sql = f"SELECT {_COLUMNS} FROM payroll_records WHERE 1=1"
        params: list[Any] = []
        if period:
            sql += " AND period=%s"
            params.append(period)
        if employee_id is not None:
            sql += " AND employee_id=%s"
            params.append(int(employee_id))
        sql += " ORDER BY period DESC, employee_id DESC LIMIT %s"
        params.append(int(limit))

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in all_rows(cur)]

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM payroll_records WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount
