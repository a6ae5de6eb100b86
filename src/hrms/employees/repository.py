from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, never on a concrete storage backend.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, department: Optional[str] = None, include_inactive: bool = False) -> Sequence[Employee]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError


class EmployeeOwnedRecords(Protocol):
    """Any store keyed by employee; its rows go when the employee is deleted."""

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
