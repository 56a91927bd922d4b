from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, hourly_rate, is_active, primary_site_id, position"


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        hourly_rate=Decimal(str(r["hourly_rate"])),
        is_active=bool(r["is_active"]),
        primary_site_id=int(r["primary_site_id"]) if r.get("primary_site_id") is not None else None,
        position=r.get("position"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self, *, active_only: bool = True) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees"
        if active_only:
            sql += " WHERE is_active=1"
        sql += " ORDER BY employee_id"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None
