from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional

from mysql.connector import errorcode

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Any]:
    """Cursor on a short-lived connection; commits on a clean exit, rolls back otherwise."""
    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield cur
        conn.commit()
    except Exception as exc:
        conn.rollback()
        logger.warning("Rolled back transaction on %s: %s", conn_factory.config.database, exc)
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()


def first_row(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def all_rows(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def is_duplicate_key(exc: Exception) -> bool:
    return getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def as_date(value: Any) -> Optional[date]:
    """DATE columns come back as date, but some drivers hand back datetime or str."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()
