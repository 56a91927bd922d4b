from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, optional_decimal
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = (
    "attendance_id, employee_id, work_date, clock_in, clock_out, status, "
    "late_minutes, total_hours, regular_hours, overtime_hours"
)

# Only the clock-out half of a record may be patched.
_PATCHABLE = ("clock_out", "total_hours", "regular_hours", "overtime_hours")


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        clock_in=normalize_mysql_time(r["clock_in"]),
        clock_out=normalize_mysql_time(r.get("clock_out")),
        status=AttendanceStatus(r["status"]),
        late_minutes=int(r.get("late_minutes") or 0),
        total_hours=optional_decimal(r.get("total_hours")),
        regular_hours=optional_decimal(r.get("regular_hours")),
        overtime_hours=optional_decimal(r.get("overtime_hours")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_attendance(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        sql = f"SELECT {_COLUMNS} FROM attendance_records"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY work_date, employee_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_record(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, clock_in, status, late_minutes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (record.employee_id, record.work_date, record.clock_in, record.status.value, record.late_minutes),
            )
            return replace(record, attendance_id=int(cur.lastrowid))

    def update_attendance(self, attendance_id: int, **patch: Any) -> AttendanceRecord:
        fields = {k: v for k, v in patch.items() if k in _PATCHABLE}
        if len(fields) != len(patch):
            raise ValueError(f"Unsupported attendance fields: {sorted(set(patch) - set(_PATCHABLE))}")

        with db_cursor(self._conn_factory) as (_, cur):
            assignments = ", ".join(f"{k}=%s" for k in fields)
            cur.execute(
                f"UPDATE attendance_records SET {assignments} WHERE attendance_id=%s",
                (*fields.values(), int(attendance_id)),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            if not r:
                raise NotFoundError(f"Attendance {attendance_id} does not exist")
            return _row_to_record(r)
