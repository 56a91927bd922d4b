from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from clinic_timepay.attendance.model import AttendanceRecord
from clinic_timepay.core.enums import AttendanceStatus, PayrollStatus
from clinic_timepay.core.exceptions import AlreadyExistsError, InvalidTransitionError, NotFoundError
from clinic_timepay.payroll.service import PayrollService, month_period

from fakes import InMemoryAttendance, InMemoryPayroll

PERIOD = month_period(2026, 3)


def closed(employee_id: int, day: date, total: str = "8.00", overtime: str = "0.00") -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=None,
        employee_id=employee_id,
        work_date=day,
        clock_in=time(8),
        clock_out=time(16),
        status=AttendanceStatus.PRESENT,
        total_hours=Decimal(total),
        regular_hours=Decimal(total) - Decimal(overtime),
        overtime_hours=Decimal(overtime),
    )


@pytest.fixture
def attendance():
    return InMemoryAttendance(
        [
            closed(1, date(2026, 3, 2), "10.00", "2.00"),
            closed(1, date(2026, 3, 3)),
            # Outside the period.
            closed(1, date(2026, 4, 1)),
            # Still open.
            AttendanceRecord(attendance_id=None, employee_id=1, work_date=date(2026, 3, 4), clock_in=time(8), status=AttendanceStatus.PRESENT),
        ]
    )


def test_month_period_covers_whole_month():
    assert month_period(2026, 2) == (date(2026, 2, 1), date(2026, 2, 28))
    assert month_period(2028, 2) == (date(2028, 2, 1), date(2028, 2, 29))


def test_generation_creates_pending_entries_from_closed_records(employees_repo, attendance, payroll_repo):
    service = PayrollService(payroll_repo, employees_repo, attendance)

    result = service.generate_for_period(period_start=PERIOD[0], period_end=PERIOD[1])

    assert [e.employee_id for e in result.created] == [1, 2]
    assert result.skipped == []
    entry = result.created[0]
    assert entry.employee_id == 1
    assert entry.status == PayrollStatus.PENDING
    assert entry.regular_hours == Decimal("16.00")
    assert entry.overtime_hours == Decimal("2.00")
    assert entry.regular_pay == Decimal("1600.00")
    assert entry.overtime_pay == Decimal("300.00")
    assert entry.gross_pay == entry.regular_pay + entry.overtime_pay
    assert entry.net_pay == entry.gross_pay - entry.deductions.total


def test_generation_is_idempotent(employees_repo, attendance, payroll_repo):
    service = PayrollService(payroll_repo, employees_repo, attendance)

    service.generate_for_period(period_start=PERIOD[0], period_end=PERIOD[1])
    second = service.generate_for_period(period_start=PERIOD[0], period_end=PERIOD[1])

    assert second.created_count == 0
    assert [(s.item["employee_id"], s.reason) for s in second.skipped] == [(1, "already_exists"), (2, "already_exists")]
    assert len(payroll_repo.list_payroll(employee_id=1)) == 1


def test_failure_for_one_employee_does_not_stop_others(employees_repo, attendance):
    attendance.create_attendance(closed(2, date(2026, 3, 5)))
    payroll_repo = InMemoryPayroll(fail_for={1})
    service = PayrollService(payroll_repo, employees_repo, attendance)

    result = service.generate_for_period(period_start=PERIOD[0], period_end=PERIOD[1])

    assert result.failed_count == 1
    assert result.failed[0].item == {"employee_id": 1}
    assert [e.employee_id for e in result.created] == [2]


def test_single_employee_generation_rejects_duplicates(employees_repo, attendance, payroll_repo):
    service = PayrollService(payroll_repo, employees_repo, attendance)

    service.generate_for_employee(1, period_start=PERIOD[0], period_end=PERIOD[1])

    with pytest.raises(AlreadyExistsError):
        service.generate_for_employee(1, period_start=PERIOD[0], period_end=PERIOD[1])
    with pytest.raises(NotFoundError):
        service.generate_for_employee(42, period_start=PERIOD[0], period_end=PERIOD[1])


def test_status_only_moves_forward(employees_repo, attendance, payroll_repo):
    service = PayrollService(payroll_repo, employees_repo, attendance)
    entry = service.generate_for_employee(1, period_start=PERIOD[0], period_end=PERIOD[1])

    with pytest.raises(InvalidTransitionError):
        service.advance_status(entry.payroll_id, PayrollStatus.PAID)

    assert service.advance_status(entry.payroll_id, PayrollStatus.PROCESSED).status == PayrollStatus.PROCESSED
    assert service.advance_status(entry.payroll_id, PayrollStatus.PAID).status == PayrollStatus.PAID

    with pytest.raises(InvalidTransitionError):
        service.advance_status(entry.payroll_id, PayrollStatus.PROCESSED)
    with pytest.raises(InvalidTransitionError):
        service.advance_status(entry.payroll_id, PayrollStatus.PENDING)


def test_employee_without_attendance_gets_zero_pay_entry(employees_repo, payroll_repo):
    service = PayrollService(payroll_repo, employees_repo, InMemoryAttendance())

    result = service.generate_for_period(period_start=PERIOD[0], period_end=PERIOD[1])

    # Inactive employee 3 is left out.
    assert [e.employee_id for e in result.created] == [1, 2]
    entry = result.created[1]
    assert entry.status == PayrollStatus.PENDING
    assert entry.gross_pay == Decimal("0.00")
    assert entry.deductions.social_insurance == Decimal("180.00")
    assert entry.deductions.health_insurance == Decimal("500.00")
    assert entry.deductions.total == Decimal("680.00")
    assert entry.net_pay == Decimal("-680.00")


def test_single_employee_generation_without_attendance_creates_entry(employees_repo, payroll_repo):
    service = PayrollService(payroll_repo, employees_repo, InMemoryAttendance())

    entry = service.generate_for_employee(2, period_start=PERIOD[0], period_end=PERIOD[1])

    assert entry.payroll_id is not None
    assert entry.regular_hours == Decimal("0.00")
