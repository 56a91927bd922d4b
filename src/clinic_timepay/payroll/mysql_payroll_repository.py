from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DeductionBreakdown, PayrollEntry
from .repository import PayrollRepository

_COLUMNS = (
    "payroll_id, employee_id, period_start, period_end, regular_hours, overtime_hours, "
    "regular_pay, overtime_pay, gross_pay, withholding_tax, social_insurance, "
    "health_insurance, housing_fund, net_pay, status"
)


def _dec(value) -> Decimal:
    return Decimal(str(value))


def _row_to_entry(r: dict) -> PayrollEntry:
    return PayrollEntry(
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        period_start=r["period_start"],
        period_end=r["period_end"],
        regular_hours=_dec(r["regular_hours"]),
        overtime_hours=_dec(r["overtime_hours"]),
        regular_pay=_dec(r["regular_pay"]),
        overtime_pay=_dec(r["overtime_pay"]),
        gross_pay=_dec(r["gross_pay"]),
        deductions=DeductionBreakdown(
            withholding_tax=_dec(r["withholding_tax"]),
            social_insurance=_dec(r["social_insurance"]),
            health_insurance=_dec(r["health_insurance"]),
            housing_fund=_dec(r["housing_fund"]),
        ),
        net_pay=_dec(r["net_pay"]),
        status=PayrollStatus(r["status"]),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_payroll(
        self,
        *,
        employee_id: Optional[int] = None,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> Sequence[PayrollEntry]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if period_start is not None:
            clauses.append("period_start >= %s")
            params.append(period_start)
        if period_end is not None:
            clauses.append("period_start <= %s")
            params.append(period_end)

        sql = f"SELECT {_COLUMNS} FROM payroll_entries"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY period_start DESC, employee_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_entry(r) for r in fetchall(cur)]

    def get_by_id(self, payroll_id: int) -> Optional[PayrollEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_entries WHERE payroll_id=%s", (int(payroll_id),))
            r = fetchone(cur)
            return _row_to_entry(r) if r else None

    def create_payroll(self, entry: PayrollEntry) -> PayrollEntry:
        d = entry.deductions
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_entries(
                    employee_id, period_start, period_end, regular_hours, overtime_hours,
                    regular_pay, overtime_pay, gross_pay, withholding_tax, social_insurance,
                    health_insurance, housing_fund, net_pay, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.employee_id,
                    entry.period_start,
                    entry.period_end,
                    entry.regular_hours,
                    entry.overtime_hours,
                    entry.regular_pay,
                    entry.overtime_pay,
                    entry.gross_pay,
                    d.withholding_tax,
                    d.social_insurance,
                    d.health_insurance,
                    d.housing_fund,
                    entry.net_pay,
                    entry.status.value,
                ),
            )
            return replace(entry, payroll_id=int(cur.lastrowid))

    def update_status(self, payroll_id: int, status: PayrollStatus) -> PayrollEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE payroll_entries SET status=%s WHERE payroll_id=%s", (status.value, int(payroll_id)))
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_entries WHERE payroll_id=%s", (int(payroll_id),))
            r = fetchone(cur)
            if not r:
                raise NotFoundError(f"Payroll {payroll_id} does not exist")
            return _row_to_entry(r)
