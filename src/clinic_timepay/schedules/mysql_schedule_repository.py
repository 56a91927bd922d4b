from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import ScheduleStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import ShiftAssignment
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_schedules(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[ShiftAssignment]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT schedule_id, employee_id, work_date, start_time, end_time, site_id, status, position
                FROM shift_assignments
                WHERE {' AND '.join(clauses)}
                ORDER BY work_date, start_time, employee_id
                """,
                tuple(params),
            )
            return [
                ShiftAssignment(
                    schedule_id=int(r["schedule_id"]),
                    employee_id=int(r["employee_id"]),
                    work_date=r["work_date"],
                    start_time=normalize_mysql_time(r["start_time"]),
                    end_time=normalize_mysql_time(r["end_time"]),
                    site_id=int(r["site_id"]) if r.get("site_id") is not None else None,
                    status=ScheduleStatus(r["status"]),
                    position=r.get("position"),
                )
                for r in fetchall(cur)
            ]

    def create_schedule(self, assignment: ShiftAssignment) -> ShiftAssignment:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shift_assignments(employee_id, work_date, start_time, end_time, site_id, status, position)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    assignment.employee_id,
                    assignment.work_date,
                    assignment.start_time,
                    assignment.end_time,
                    assignment.site_id,
                    assignment.status.value,
                    assignment.position,
                ),
            )
            return replace(assignment, schedule_id=int(cur.lastrowid))
