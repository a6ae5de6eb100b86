from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from threading import Lock
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import Role
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self):
        self._lock = Lock()
        self._rows: dict[int, Employee] = {}
        self._next_id = 1

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            return self._rows.get(int(employee_id))

    def get_by_email(self, email: str) -> Optional[Employee]:
        needle = (email or "").strip().lower()
        with self._lock:
            for e in self._rows.values():
                if e.email.lower() == needle:
                    return e
        return None

    def list_all(self, *, department: Optional[str] = None, include_inactive: bool = False) -> Sequence[Employee]:
        with self._lock:
            rows = list(self._rows.values())
        if department:
            rows = [e for e in rows if (e.department or "").lower() == department.lower()]
        if not include_inactive:
            rows = [e for e in rows if e.is_active]
        rows.sort(key=lambda e: e.employee_id)
        return rows

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
        with self._lock:
            employee_id = self._next_id
            self._next_id += 1
            self._rows[employee_id] = Employee(
                employee_id=employee_id,
                full_name=full_name,
                email=email,
                department=department,
                position=position,
                role=role,
                base_salary=base_salary,
                hire_date=hire_date,
                is_active=True,
            )
            return employee_id

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        with self._lock:
            current = self._rows.get(int(employee_id))
            if not current:
                return False
            self._rows[current.employee_id] = replace(current, **dict(changes))
            return True

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        return self.update(employee_id, {"is_active": bool(is_active)})

    def delete_by_id(self, employee_id: int) -> bool:
        with self._lock:
            return self._rows.pop(int(employee_id), None) is not None
