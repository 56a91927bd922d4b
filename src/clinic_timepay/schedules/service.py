from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import is_weekend, iter_dates, month_bounds
from ..common.results import BatchResult
from ..config.settings import EngineSettings
from ..core.exceptions import NoEligibleEmployeesError, ValidationError
from ..employees.repository import EmployeeRepository
from ..sites.repository import SiteRepository
from .balancer import SchedulingState, SlotRules, plan_day
from .conflicts import ConflictPair, conflicts_by_date, find_conflicts
from .model import AutoScheduleSettings, ShiftAssignment, WorkloadImbalance, WorkloadStat
from .repository import ScheduleRepository
from .workload import build_workload_stats, find_imbalances

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(
        self,
        schedules: ScheduleRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        sites: Optional[SiteRepository] = None,
        *,
        settings: Optional[EngineSettings] = None,
    ):
        self._schedules = schedules
        self._employees = employees
        self._attendance = attendance
        self._sites = sites
        self._settings = settings or EngineSettings()

    @property
    def slot_rules(self) -> SlotRules:
        return SlotRules(
            base_start_hour=self._settings.base_start_hour,
            stagger_hours=self._settings.stagger_hours,
            cutoff_hour=self._settings.cutoff_hour,
        )

    def workload_stats(self, *, start: date, end: date) -> dict[int, WorkloadStat]:
        employees = self._employees.list_employees(active_only=True)
        schedules = self._schedules.list_schedules(start=start, end=end)
        attendance = self._attendance.list_attendance(start=start, end=end)
        return build_workload_stats(employees, schedules, attendance)

    def conflicts_for_day(self, work_date: date) -> list[ConflictPair]:
        return find_conflicts(self._schedules.list_schedules(start=work_date, end=work_date))

    def conflicts_in_range(self, *, start: date, end: date) -> dict[date, list[ConflictPair]]:
        return conflicts_by_date(self._schedules.list_schedules(start=start, end=end))

    def imbalances(self, *, start: date, end: date) -> list[WorkloadImbalance]:
        return find_imbalances(self._schedules.list_schedules(start=start, end=end))

    def auto_schedule(self, options: AutoScheduleSettings) -> BatchResult[ShiftAssignment]:
        """Create shift assignments for every eligible date in the range.

        Best effort: a failed creation is recorded and the run moves on; rows
        already written stay written.
        """
        if options.end_date < options.start_date:
            raise ValidationError("end_date must not be before start_date")
        if not 1 <= options.work_days_per_week <= 7:
            raise ValidationError("work_days_per_week must be between 1 and 7")
        if options.shift_hours <= 0:
            raise ValidationError("shift_hours must be positive")

        employees = list(self._employees.list_employees(active_only=True))
        if not employees:
            raise NoEligibleEmployeesError("No active employees available for scheduling")

        sites = list(self._sites.list_sites()) if self._sites else []

        # Seed from the calendar month the run starts in.
        month_start, month_end = month_bounds(options.start_date.year, options.start_date.month)
        stats = self.workload_stats(start=month_start, end=month_end)
        state = SchedulingState(
            accumulated_hours={e.employee_id: stats[e.employee_id].total_hours for e in employees}
        )
        reliability = {employee_id: stat.reliability for employee_id, stat in stats.items()}
        rules = self.slot_rules

        result: BatchResult[ShiftAssignment] = BatchResult()
        for work_date in iter_dates(options.start_date, options.end_date):
            if is_weekend(work_date) and not options.include_weekends:
                continue

            plan, state = plan_day(
                state,
                work_date=work_date,
                employees=employees,
                sites=sites,
                reliability=reliability,
                work_days_per_week=options.work_days_per_week,
                shift_hours=options.shift_hours,
                balance_workload=options.balance_workload,
                rules=rules,
            )

            for employee in plan.dropped:
                result.skip({"employee_id": employee.employee_id, "date": work_date.isoformat()}, "past_cutoff")

            for proposal in plan.proposals:
                try:
                    created = self._schedules.create_schedule(proposal)
                except Exception as exc:
                    logger.warning(
                        "Could not create schedule employee=%s date=%s: %s",
                        proposal.employee_id,
                        work_date.isoformat(),
                        exc,
                    )
                    result.fail(proposal, exc)
                    continue
                result.created.append(created)
                state = state.add_hours(proposal.employee_id, options.shift_hours)

        logger.info(
            "Auto-schedule %s..%s created=%s skipped=%s failed=%s",
            options.start_date.isoformat(),
            options.end_date.isoformat(),
            result.created_count,
            result.skipped_count,
            result.failed_count,
        )
        return result
