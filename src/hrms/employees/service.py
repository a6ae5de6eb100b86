from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.validators import format_money, parse_money, require_email, require_non_empty
from ..core.enums import Role
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import EDITABLE_FIELDS, Employee
from .repository import EmployeeOwnedRecords, EmployeeRepository

logger = logging.getLogger(__name__)


def parse_role(value: Any, *, default: Role = Role.EMPLOYEE) -> Role:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown role: {value}")


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def employee_to_api(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "full_name": e.full_name,
        "email": e.email,
        "department": e.department,
        "position": e.position,
        "role": e.role.value,
        "base_salary": format_money(e.base_salary),
        "hire_date": e.hire_date.isoformat() if e.hire_date else None,
        "is_active": e.is_active,
    }


class EmployeeService:
    """Use case: maintain the employee directory."""

    def __init__(self, employees: EmployeeRepository, *, owned_records: Sequence[EmployeeOwnedRecords] = ()):
        self._employees = employees
        self._owned_records = tuple(owned_records)

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def list(self, *, department: Optional[str] = None, include_inactive: bool = False) -> Sequence[Employee]:
        return self._employees.list_all(department=department, include_inactive=include_inactive)

    def create(
        self,
        *,
        full_name: str,
        email: str,
        department: Optional[str] = None,
        position: Optional[str] = None,
        role: Any = None,
        base_salary: Any = None,
        hire_date: Any = None,
    ) -> Employee:
        full_name = require_non_empty(full_name, "Full name")
        email = require_email(email)
        if self._employees.get_by_email(email):
            raise ConflictError(f"An employee with email {email} already exists")

        hire_date = parse_optional_date(hire_date, "Hire date")

        employee_id = self._employees.create(
            full_name=full_name,
            email=email,
            department=_optional_text(department),
            position=_optional_text(position),
            role=parse_role(role),
            base_salary=parse_money(base_salary, "Base salary", default=Decimal("0.00")),
            hire_date=hire_date,
        )
        logger.info("Created employee %s <%s>", employee_id, email)
        return self.get(employee_id)

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Employee:
        current = self.get(employee_id)

        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")

        clean: dict[str, Any] = {}
        for key, value in changes.items():
            if key == "full_name":
                clean[key] = require_non_empty(value, "Full name")
            elif key == "email":
                email = require_email(value)
                other = self._employees.get_by_email(email)
                if other and other.employee_id != current.employee_id:
                    raise ConflictError(f"An employee with email {email} already exists")
                clean[key] = email
            elif key == "role":
                clean[key] = parse_role(value)
            elif key == "base_salary":
                clean[key] = parse_money(value, "Base salary")
            elif key == "hire_date":
                clean[key] = parse_optional_date(value, "Hire date")
            else:
                clean[key] = _optional_text(value)

        if clean and not self._employees.update(current.employee_id, clean):
            raise NotFoundError(f"Employee {employee_id} not found")
        return self.get(current.employee_id)

    def deactivate(self, employee_id: int) -> Employee:
        current = self.get(employee_id)
        self._employees.set_active(current.employee_id, is_active=False)
        logger.info("Deactivated employee %s", current.employee_id)
        return self.get(current.employee_id)

    def delete(self, employee_id: int) -> None:
        current = self.get(employee_id)
        if current.is_admin:
            raise ValidationError("Admin accounts cannot be deleted")
        removed = sum(store.delete_for_employee(current.employee_id) for store in self._owned_records)
        if not self._employees.delete_by_id(current.employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Deleted employee %s with %d dependent record(s)", current.employee_id, removed)
