from __future__ import annotations

import logging
from datetime import date

from ..common.datetime_utils import TimeLike, parse_clock_time
from ..config.settings import EngineSettings
from ..core.exceptions import AlreadyCompletedError, AlreadyExistsError, ValidationError
from ..employees.repository import EmployeeRepository
from .classifier import classify, compute_hours
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        settings: EngineSettings | None = None,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._settings = settings or EngineSettings()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _require_employee(self, employee_id: int):
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")
        if not employee.is_active:
            raise ValidationError(f"Employee {employee_id} is not active")
        return employee

    def clock_in(self, employee_id: int, work_date: date, clock_in: TimeLike) -> AttendanceRecord:
        at = parse_clock_time(clock_in)
        self._require_employee(employee_id)

        existing = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if existing:
            raise AlreadyExistsError(f"Employee {employee_id} already clocked in on {work_date.isoformat()}")

        decision = classify(at, self._settings.grace_period_end, factory=self._factory)

        record = self._attendance.create_attendance(
            AttendanceRecord(
                attendance_id=None,
                employee_id=employee_id,
                work_date=work_date,
                clock_in=at,
                status=decision.status,
                late_minutes=decision.late_minutes,
            )
        )
        logger.info(
            "Clock-in employee=%s date=%s status=%s late_minutes=%s",
            employee_id,
            work_date.isoformat(),
            decision.status.value,
            decision.late_minutes,
        )
        return record

    def clock_out(self, employee_id: int, work_date: date, clock_out: TimeLike) -> AttendanceRecord:
        at = parse_clock_time(clock_out)

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise ValidationError(f"Employee {employee_id} has not clocked in on {work_date.isoformat()}")
        if not record.is_open:
            raise AlreadyCompletedError(f"Employee {employee_id} already clocked out on {work_date.isoformat()}")

        hours = compute_hours(
            record.clock_in,
            at,
            self._settings.standard_shift_hours,
            overnight_policy=self._settings.overnight_policy,
        )
        updated = self._attendance.update_attendance(
            int(record.attendance_id),
            clock_out=at,
            total_hours=hours.total_hours,
            regular_hours=hours.regular_hours,
            overtime_hours=hours.overtime_hours,
        )
        logger.info(
            "Clock-out employee=%s date=%s total_hours=%s overtime_hours=%s",
            employee_id,
            work_date.isoformat(),
            hours.total_hours,
            hours.overtime_hours,
        )
        return updated

    def record_scan(self, employee_id: int, work_date: date, at: TimeLike) -> AttendanceRecord:
        """One scan per event: closes an open record, otherwise opens a new one."""
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if record and record.is_open:
            return self.clock_out(employee_id, work_date, at)
        if record:
            raise AlreadyCompletedError(f"Employee {employee_id} already completed {work_date.isoformat()}")
        return self.clock_in(employee_id, work_date, at)

