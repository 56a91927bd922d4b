"""Greedy workload balancer used by the auto-scheduler.

This is a heuristic, not an optimizer: each day picks the least-loaded
employees (ties broken by reliability) and staggers their start times. Run
state lives in an explicit ``SchedulingState`` value so independent runs
never share accumulators.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from functools import cmp_to_key
from typing import Mapping, Optional, Sequence

from ..common.money import ZERO, to_decimal
from ..core import constants
from ..core.enums import ScheduleStatus
from ..employees.model import Employee
from ..sites.model import WorkSite
from .model import ShiftAssignment


@dataclass(frozen=True)
class SchedulingState:
    """Accumulated hours per employee and the round-robin cursor for one run."""

    accumulated_hours: Mapping[int, Decimal] = field(default_factory=dict)
    cursor: int = 0

    def hours_for(self, employee_id: int) -> Decimal:
        return self.accumulated_hours.get(employee_id, ZERO)

    def add_hours(self, employee_id: int, hours: Decimal | int) -> "SchedulingState":
        updated = dict(self.accumulated_hours)
        updated[employee_id] = self.hours_for(employee_id) + to_decimal(hours)
        return SchedulingState(accumulated_hours=updated, cursor=self.cursor)

    def advance(self, steps: int) -> "SchedulingState":
        return SchedulingState(accumulated_hours=self.accumulated_hours, cursor=self.cursor + steps)


@dataclass(frozen=True)
class SlotRules:
    base_start_hour: int = constants.DEFAULT_BASE_START_HOUR
    stagger_hours: int = constants.DEFAULT_STAGGER_HOURS
    cutoff_hour: int = constants.DEFAULT_CUTOFF_HOUR


@dataclass(frozen=True)
class DayPlan:
    work_date: date
    proposals: list[ShiftAssignment]
    # Selected but pushed past the cutoff hour by the stagger; not retried.
    dropped: list[Employee]


def employees_needed(active_count: int, work_days_per_week: int) -> int:
    return min(math.ceil(active_count * work_days_per_week / 7), active_count)


def select_candidates(
    pool: Sequence[Employee],
    accumulated_hours: Mapping[int, Decimal],
    reliability: Mapping[int, int],
    n: int,
) -> list[Employee]:
    """Least-loaded first; hours within 2 of each other fall back to reliability."""

    def compare(a: Employee, b: Employee) -> int:
        a_hours = accumulated_hours.get(a.employee_id, ZERO)
        b_hours = accumulated_hours.get(b.employee_id, ZERO)
        if abs(a_hours - b_hours) > constants.WORKLOAD_TIE_HOURS:
            return -1 if a_hours < b_hours else 1
        a_rel = reliability.get(a.employee_id, constants.DEFAULT_RELIABILITY)
        b_rel = reliability.get(b.employee_id, constants.DEFAULT_RELIABILITY)
        return b_rel - a_rel

    return sorted(pool, key=cmp_to_key(compare))[:n]


def select_round_robin(pool: Sequence[Employee], cursor: int, n: int) -> list[Employee]:
    return [pool[(cursor + i) % len(pool)] for i in range(n)]


def plan_day(
    state: SchedulingState,
    *,
    work_date: date,
    employees: Sequence[Employee],
    sites: Sequence[WorkSite],
    reliability: Mapping[int, int],
    work_days_per_week: int,
    shift_hours: int,
    balance_workload: bool,
    rules: Optional[SlotRules] = None,
) -> tuple[DayPlan, SchedulingState]:
    """Choose today's employees and slots.

    The returned state has the cursor advanced; hours are added by the caller
    once each proposal has actually been created.
    """
    rules = rules or SlotRules()
    needed = employees_needed(len(employees), work_days_per_week)

    if balance_workload:
        selected = select_candidates(employees, state.accumulated_hours, reliability, needed)
    else:
        selected = select_round_robin(employees, state.cursor, needed)
        state = state.advance(needed)

    proposals: list[ShiftAssignment] = []
    dropped: list[Employee] = []
    for index, employee in enumerate(selected):
        start_hour = rules.base_start_hour + index * rules.stagger_hours
        end_hour = start_hour + shift_hours
        if end_hour > rules.cutoff_hour:
            dropped.append(employee)
            continue

        site_id = employee.primary_site_id
        if site_id is None and sites:
            site_id = sites[index % len(sites)].site_id

        proposals.append(
            ShiftAssignment(
                schedule_id=None,
                employee_id=employee.employee_id,
                work_date=work_date,
                start_time=time(hour=start_hour),
                end_time=time(hour=end_hour),
                site_id=site_id,
                status=ScheduleStatus.SCHEDULED,
                position=employee.position,
            )
        )

    return DayPlan(work_date=work_date, proposals=proposals, dropped=dropped), state
