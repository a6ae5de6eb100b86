from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role, mirrored into the client's ``userRole`` flag."""

    ADMIN = "admin"
    HR = "hr"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Normalized attendance status stored with each record."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    ABSENT = "ABSENT"


class RequestStatus(str, Enum):
    """Approval workflow state of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class LeaveType(str, Enum):
    ANNUAL = "ANNUAL"
    SICK = "SICK"
    CASUAL = "CASUAL"
    UNPAID = "UNPAID"
