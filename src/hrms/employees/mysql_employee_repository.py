from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, as_date, db_cursor, first_row
from .model import EDITABLE_FIELDS, Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, email, department, position, role, base_salary, hire_date, is_active"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        email=r["email"],
        department=r.get("department"),
        position=r.get("position"),
        role=Role(r["role"]),
        base_salary=Decimal(str(r.get("base_salary") or 0)),
        hire_date=as_date(r.get("hire_date")),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = first_row(cur)
            return _to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE LOWER(email)=LOWER(%s)", (email,))
            row = first_row(cur)
            return _to_employee(row) if row else None

    def list_all(self, *, department: Optional[str] = None, include_inactive: bool = False) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees WHERE 1=1"
        params: list[Any] = []
        if department:
            sql += " AND LOWER(department)=LOWER(%s)"
            params.append(department)
        if not include_inactive:
            sql += " AND is_active=1"
        sql += " ORDER BY employee_id"

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [_to_employee(r) for r in all_rows(cur)]

    def create(
        self,
        *,
        full_name: str,
        email: str,
        department: Optional[str],
        position: Optional[str],
        role: Role,
        base_salary: Decimal,
        hire_date: Optional[date],
    ) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO employees(full_name, email, department, position, role, base_salary, hire_date, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,1)
                """,
                (full_name, email, department, position, role.value, base_salary, hire_date),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        fields = [k for k in changes if k in EDITABLE_FIELDS or k == "is_active"]
        if not fields:
            return self.get_by_id(employee_id) is not None

        values = []
        for k in fields:
            v = changes[k]
            values.append(v.value if isinstance(v, Role) else v)

        assignments = ", ".join(f"{k}=%s" for k in fields)
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"UPDATE employees SET {assignments} WHERE employee_id=%s",
                (*values, int(employee_id)),
            )
            # MySQL reports 0 affected rows when values are unchanged.
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (int(employee_id),))
            return first_row(cur) is not None

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        return self.update(employee_id, {"is_active": 1 if is_active else 0})

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
