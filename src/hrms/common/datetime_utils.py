from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time
from typing import Any, Optional

from ..core.exceptions import ValidationError

_PERIOD_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def _text(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(message)
    return value.strip()


def parse_iso_date(value: str, field_name: str = "Date") -> date:
    """Parse YYYY-MM-DD string into date."""
    message = f"{field_name} must be YYYY-MM-DD"
    try:
        return datetime.strptime(_text(value, message), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(message)


def parse_optional_date(value: Any, field_name: str = "Date") -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value, field_name)


def parse_hhmm(value: str, field_name: str = "Time") -> time:
    message = f"{field_name} must be HH:MM"
    try:
        return datetime.strptime(_text(value, message), "%H:%M").time()
    except ValueError:
        raise ValidationError(message)


def parse_iso_datetime(value: str, field_name: str = "Timestamp") -> datetime:
    """Parse a local ISO timestamp; values with a UTC offset are refused."""
    message = f"{field_name} must be an ISO timestamp"
    try:
        parsed = datetime.fromisoformat(_text(value, message))
    except ValueError:
        raise ValidationError(message)
    if parsed.tzinfo is not None:
        raise ValidationError(f"{field_name} must be local time without a UTC offset")
    return parsed


def normalize_period(value: Any) -> str:
    """Validate a payroll period; only the zero-padded YYYY-MM form is accepted."""
    period = value.strip() if isinstance(value, str) else ""
    if not _PERIOD_RE.match(period):
        raise ValidationError("Period must be YYYY-MM")
    return period


def parse_period(value: Any) -> tuple[date, date]:
    """Parse a YYYY-MM payroll period into its first and last day."""
    first = datetime.strptime(normalize_period(value), "%Y-%m").date()
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def overlap_days(start: date, end: date, window_start: date, window_end: date) -> int:
    """Number of calendar days of [start, end] inside [window_start, window_end]."""
    lo = max(start, window_start)
    hi = min(end, window_end)
    if hi < lo:
        return 0
    return (hi - lo).days + 1


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()
