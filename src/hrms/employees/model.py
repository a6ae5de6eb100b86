from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object; persistence lives in the repositories.
    """

    employee_id: int
    full_name: str
    email: str
    department: Optional[str]
    position: Optional[str]
    role: Role
    base_salary: Decimal
    hire_date: Optional[date] = None
    is_active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


# Fields an update may touch; identity and activation go through their own calls.
EDITABLE_FIELDS = ("full_name", "email", "department", "position", "role", "base_salary", "hire_date")
