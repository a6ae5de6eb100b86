from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, as_date, db_cursor, first_row, is_duplicate_key
from .model import AttendanceRecord
from .repository import ALREADY_CHECKED_IN, AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, check_in_time, check_out_time, status, note"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=as_date(r["work_date"]),
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        status=AttendanceStatus(r["status"]),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            r = first_row(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = first_row(cur)
            return _to_record(r) if r else None

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 200,
    ) -> Sequence[AttendanceRecord]:
        sql = f"SELECT {_COLUMNS} FROM attendance_records WHERE 1=1"
        params: list[Any] = []
        if employee_id is not None:
            sql += " AND employee_id=%s"
            params.append(int(employee_id))
        if start_date:
            sql += " AND work_date>=%s"
            params.append(start_date)
        if end_date:
            sql += " AND work_date<=%s"
            params.append(end_date)
        sql += " ORDER BY work_date DESC, check_in_time DESC LIMIT %s"
        params.append(int(limit))

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in all_rows(cur)]

    def create_checkin(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as cur:
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, work_date, check_in_time, status, note)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (int(employee_id), work_date, check_in_time, status.value, note),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # uq (employee_id, work_date)
            if is_duplicate_key(e):
                raise ValidationError(ALREADY_CHECKED_IN) from e
            raise

    def update_record(
        self,
        *,
        attendance_id: int,
        check_in_time: datetime,
        check_out_time: Optional[datetime],
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                UPDATE attendance_records
                SET check_in_time=%s, check_out_time=%s, status=%s, note=%s
                WHERE attendance_id=%s
                """,
                (check_in_time, check_out_time, status.value, note, int(attendance_id)),
            )
            cur.execute("SELECT 1 AS found FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return first_row(cur) is not None

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM attendance_records WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount
