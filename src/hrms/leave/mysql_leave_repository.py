from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..core.enums import LeaveType, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, as_date, db_cursor, first_row
from .model import LeaveRequest
from .repository import OPEN_STATUSES, LeaveRepository, overlap_conflict

_COLUMNS = (
    "request_id, employee_id, start_date, end_date, leave_type, reason, status, created_at, decided_at, admin_note"
)


def _to_request(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        start_date=as_date(r["start_date"]),
        end_date=as_date(r["end_date"]),
        leave_type=LeaveType(r["leave_type"]),
        reason=r["reason"],
        status=RequestStatus(r["status"]),
        created_at=r["created_at"],
        decided_at=r.get("decided_at"),
        admin_note=r.get("admin_note"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: str,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as cur:
            # Row lock on the employee: one leave insert per employee at a time.
            cur.execute("SELECT employee_id FROM employees WHERE employee_id=%s FOR UPDATE", (int(employee_id),))
            first_row(cur)
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM leave_requests
                WHERE employee_id=%s AND status IN (%s, %s) AND start_date<=%s AND end_date>=%s
                ORDER BY start_date LIMIT 1
                """,
                (int(employee_id), *(s.value for s in OPEN_STATUSES), end_date, start_date),
            )
            clash = first_row(cur)
            if clash:
                raise overlap_conflict(_to_request(clash))

            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, start_date, end_date, leave_type, reason, status, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    start_date,
                    end_date,
                    leave_type.value,
                    reason,
                    RequestStatus.PENDING.value,
                    created_at,
                ),
            )
            return int(cur.lastrowid)

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE request_id=%s", (int(request_id),))
            r = first_row(cur)
            return _to_request(r) if r else None

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        sql = f"SELECT {_COLUMNS} FROM leave_requests WHERE 1=1"
        params: list[Any] = []
        if status is not None:
            sql += " AND status=%s"
            params.append(status.value)
        if employee_id is not None:
            sql += " AND employee_id=%s"
            params.append(int(employee_id))
        sql += " ORDER BY created_at DESC, request_id DESC LIMIT %s"
        params.append(int(limit))

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [_to_request(r) for r in all_rows(cur)]

    def decide(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, decided_at=%s, admin_note=%s
                WHERE request_id=%s AND status=%s
                """,
                (status.value, decided_at, admin_note, int(request_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM leave_requests WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount
