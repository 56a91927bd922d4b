from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from clinic_timepay.attendance.model import AttendanceRecord
from clinic_timepay.core.enums import PayrollStatus
from clinic_timepay.employees.model import Employee
from clinic_timepay.payroll.model import PayrollEntry
from clinic_timepay.schedules.model import ShiftAssignment
from clinic_timepay.sites.model import WorkSite


def make_employee(employee_id: int, *, rate: str = "100", active: bool = True, site: Optional[int] = None) -> Employee:
    return Employee(
        employee_id=employee_id,
        full_name=f"Employee {employee_id}",
        hourly_rate=Decimal(rate),
        is_active=active,
        primary_site_id=site,
    )


class InMemoryEmployees:
    def __init__(self, employees: list[Employee]):
        self._by_id = {e.employee_id: e for e in employees}

    def list_employees(self, *, active_only: bool = True):
        items = sorted(self._by_id.values(), key=lambda e: e.employee_id)
        return [e for e in items if e.is_active or not active_only]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)


class InMemorySites:
    def __init__(self, sites: Optional[list[WorkSite]] = None):
        self._sites = list(sites or [])

    def list_sites(self, *, active_only: bool = True):
        return [s for s in self._sites if s.is_active or not active_only]


class InMemoryAttendance:
    def __init__(self, records: Optional[list[AttendanceRecord]] = None):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0
        for r in records or []:
            self.create_attendance(r)

    def list_attendance(self, *, employee_id=None, start: Optional[date] = None, end: Optional[date] = None):
        items = [
            r
            for r in self._by_id.values()
            if (employee_id is None or r.employee_id == employee_id)
            and (start is None or r.work_date >= start)
            and (end is None or r.work_date <= end)
        ]
        return sorted(items, key=lambda r: (r.work_date, r.employee_id))

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        self._id += 1
        stored = replace(record, attendance_id=self._id)
        self._by_id[self._id] = stored
        return stored

    def update_attendance(self, attendance_id: int, **patch: Any) -> AttendanceRecord:
        stored = replace(self._by_id[attendance_id], **patch)
        self._by_id[attendance_id] = stored
        return stored


class InMemorySchedules:
    def __init__(self, assignments: Optional[list[ShiftAssignment]] = None, *, fail_on: Optional[set] = None):
        self.items: list[ShiftAssignment] = []
        self._id = 0
        # (employee_id, work_date) pairs whose creation raises.
        self._fail_on = fail_on or set()
        for a in assignments or []:
            self.create_schedule(a)

    def list_schedules(self, *, start: date, end: date, employee_id=None):
        return [
            a
            for a in self.items
            if start <= a.work_date <= end and (employee_id is None or a.employee_id == employee_id)
        ]

    def create_schedule(self, assignment: ShiftAssignment) -> ShiftAssignment:
        if (assignment.employee_id, assignment.work_date) in self._fail_on:
            raise RuntimeError("database unavailable")
        self._id += 1
        stored = replace(assignment, schedule_id=self._id)
        self.items.append(stored)
        return stored


class InMemoryPayroll:
    def __init__(self, *, fail_for: Optional[set[int]] = None):
        self._by_id: dict[int, PayrollEntry] = {}
        self._id = 0
        self._fail_for = fail_for or set()

    def list_payroll(self, *, employee_id=None, period_start=None, period_end=None):
        return [
            p
            for p in self._by_id.values()
            if (employee_id is None or p.employee_id == employee_id)
            and (period_start is None or p.period_start >= period_start)
            and (period_end is None or p.period_start <= period_end)
        ]

    def get_by_id(self, payroll_id: int) -> Optional[PayrollEntry]:
        return self._by_id.get(payroll_id)

    def create_payroll(self, entry: PayrollEntry) -> PayrollEntry:
        if entry.employee_id in self._fail_for:
            raise RuntimeError("write failed")
        self._id += 1
        stored = replace(entry, payroll_id=self._id)
        self._by_id[self._id] = stored
        return stored

    def update_status(self, payroll_id: int, status: PayrollStatus) -> PayrollEntry:
        stored = replace(self._by_id[payroll_id], status=status)
        self._by_id[payroll_id] = stored
        return stored
