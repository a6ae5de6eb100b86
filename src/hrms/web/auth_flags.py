"""Simulated client-side auth state.

The browser keeps a handful of local-storage flags to remember who logged
in. Nothing here is verified server-side; the flags only drive navigation.
This module is the single definition of the key names and of the access
gate, rendered into ``script.js`` and reused by the auth API.
"""

from __future__ import annotations

from typing import MutableMapping, Optional

SIMULATED_TOKEN = "simulated-token"

AUTH_TOKEN_KEY = "authToken"
USER_EMAIL_KEY = "userEmail"
IS_ADMIN_KEY = "isAdmin"
EMPLOYEE_ID_KEY = "employeeId"
USER_ROLE_KEY = "userRole"

AUTH_STORAGE_KEYS = (AUTH_TOKEN_KEY, USER_EMAIL_KEY, IS_ADMIN_KEY, EMPLOYEE_ID_KEY, USER_ROLE_KEY)

PROTECTED_PAGES = ("dashboard", "attendance", "leave", "payroll", "profile")

# The dashboard is reachable without the token flag.
UNGATED_PAGE = "dashboard"


def set_auth_token(
    storage: MutableMapping[str, str],
    email: str,
    is_admin: bool,
    employee_id: Optional[object] = None,
    role: Optional[str] = None,
) -> MutableMapping[str, str]:
    storage[AUTH_TOKEN_KEY] = SIMULATED_TOKEN
    storage[USER_EMAIL_KEY] = email
    storage[IS_ADMIN_KEY] = "true" if is_admin else "false"
    if employee_id:
        storage[EMPLOYEE_ID_KEY] = str(employee_id)
    if role:
        storage[USER_ROLE_KEY] = role
    return storage


def clear_auth(storage: MutableMapping[str, str]) -> MutableMapping[str, str]:
    for key in AUTH_STORAGE_KEYS:
        storage.pop(key, None)
    return storage


def is_protected_path(pathname: str) -> bool:
    return any(page in (pathname or "") for page in PROTECTED_PAGES)


def redirect_target(pathname: str, storage: MutableMapping[str, str]) -> Optional[str]:
    """Where the bootstrap script sends the browser, or None to stay."""
    if not is_protected_path(pathname) or storage.get(AUTH_TOKEN_KEY):
        return None
    if UNGATED_PAGE in pathname:
        return None
    return "/"
