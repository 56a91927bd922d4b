from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..common.results import BatchResult
from ..core.enums import PayrollStatus
from ..core.exceptions import AlreadyExistsError, InvalidTransitionError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollCalculation, PayrollEntry
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def month_period(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month, the default pay period."""
    return month_bounds(year, month)


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def _existing_entry(self, employee_id: int, period_start: date) -> Optional[PayrollEntry]:
        entries = self._payroll.list_payroll(employee_id=employee_id, period_start=period_start, period_end=period_start)
        for e in entries:
            if e.period_start == period_start:
                return e
        return None

    def calculate(self, employee: Employee, *, period_start: date, period_end: date) -> PayrollCalculation:
        """Run the payroll formulas over the clocked-out records in the period.

        No attendance still yields a calculation: zero pay with the minimum contributions.
        """
        records = [
            r
            for r in self._attendance.list_attendance(employee_id=employee.employee_id, start=period_start, end=period_end)
            if period_start <= r.work_date <= period_end and r.total_hours is not None
        ]
        return self._calculator.calculate(hourly_rate=employee.hourly_rate, records=records)

    def _create_entry(self, employee: Employee, *, period_start: date, period_end: date) -> PayrollEntry:
        calc = self.calculate(employee, period_start=period_start, period_end=period_end)
        entry = PayrollEntry.from_calculation(
            calc,
            employee_id=employee.employee_id,
            period_start=period_start,
            period_end=period_end,
        )
        return self._payroll.create_payroll(entry)

    def generate_for_employee(self, employee_id: int, *, period_start: date, period_end: date) -> PayrollEntry:
        self._validate_period(period_start, period_end)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        if self._existing_entry(employee_id, period_start):
            raise AlreadyExistsError(
                f"Payroll for employee {employee_id} starting {period_start.isoformat()} already exists"
            )

        return self._create_entry(employee, period_start=period_start, period_end=period_end)

    def generate_for_period(self, *, period_start: date, period_end: date) -> BatchResult[PayrollEntry]:
        """Create pending entries for every active employee.

        Running it again for the same period is a no-op: existing entries are skipped.
        """
        self._validate_period(period_start, period_end)
        result: BatchResult[PayrollEntry] = BatchResult()

        for employee in self._employees.list_employees(active_only=True):
            try:
                if self._existing_entry(employee.employee_id, period_start):
                    logger.info(
                        "Payroll already exists employee=%s period_start=%s",
                        employee.employee_id,
                        period_start.isoformat(),
                    )
                    result.skip({"employee_id": employee.employee_id}, "already_exists")
                    continue

                created = self._create_entry(employee, period_start=period_start, period_end=period_end)
            except Exception as exc:
                logger.warning("Payroll generation failed employee=%s: %s", employee.employee_id, exc)
                result.fail({"employee_id": employee.employee_id}, exc)
                continue

            result.created.append(created)

        logger.info(
            "Payroll %s..%s created=%s skipped=%s failed=%s",
            period_start.isoformat(),
            period_end.isoformat(),
            result.created_count,
            result.skipped_count,
            result.failed_count,
        )
        return result

    def advance_status(self, payroll_id: int, target: PayrollStatus) -> PayrollEntry:
        entry = self._payroll.get_by_id(payroll_id)
        if not entry:
            raise NotFoundError(f"Payroll {payroll_id} does not exist")
        if entry.status.next_status() != target:
            raise InvalidTransitionError(f"Cannot move payroll {payroll_id} from {entry.status.value} to {target.value}")
        return self._payroll.update_status(payroll_id, target)

    @staticmethod
    def _validate_period(period_start: date, period_end: date) -> None:
        if period_end < period_start:
            raise ValidationError("period_end must not be before period_start")
