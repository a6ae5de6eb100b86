from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_email
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..employees.repository import EmployeeRepository
from ..web.auth_flags import AUTH_STORAGE_KEYS, set_auth_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What the client keeps after login."""

    employee_id: int
    full_name: str
    email: str
    role: Role
    department: Optional[str]

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_api(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "department": self.department,
            "is_admin": self.is_admin,
        }


class AuthService:
    """Use case: simulated login.

    Resolves an email to an active employee and hands back the local-storage
    flags the browser should set. No password or token is verified.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def login(self, email: str) -> SessionUser:
        email = require_email(email)
        employee = self._employees.get_by_email(email)
        if not employee or not employee.is_active:
            logger.info("Login refused for %s", email)
            raise AuthenticationError("Unknown or inactive account")

        return SessionUser(
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            email=employee.email,
            role=employee.role,
            department=employee.department,
        )

    @staticmethod
    def storage_flags(user: SessionUser) -> dict[str, str]:
        return dict(
            set_auth_token(
                {},
                user.email,
                user.is_admin,
                employee_id=user.employee_id,
                role=user.role.value,
            )
        )

    @staticmethod
    def logout_keys() -> list[str]:
        return list(AUTH_STORAGE_KEYS)
