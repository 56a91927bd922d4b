from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import on_nominal_day
from ..common.money import round2
from ..core import constants
from ..core.enums import ScheduleStatus


@dataclass(frozen=True)
class ShiftAssignment:
    """Domain entity: a planned work interval for one employee on one date."""

    schedule_id: Optional[int]
    employee_id: int
    work_date: date
    start_time: time
    end_time: time
    site_id: Optional[int] = None
    status: ScheduleStatus = ScheduleStatus.SCHEDULED
    position: Optional[str] = None

    @property
    def duration_hours(self) -> Decimal:
        delta = on_nominal_day(self.end_time) - on_nominal_day(self.start_time)
        return round2(Decimal(int(delta.total_seconds())) / Decimal(3600))


@dataclass(frozen=True)
class AutoScheduleSettings:
    start_date: date
    end_date: date
    work_days_per_week: int = constants.DEFAULT_WORK_DAYS_PER_WEEK
    shift_hours: int = constants.DEFAULT_SHIFT_HOURS
    include_weekends: bool = False
    balance_workload: bool = True


@dataclass(frozen=True)
class WorkloadStat:
    employee_id: int
    total_hours: Decimal
    total_shifts: int
    reliability: int
    avg_hours_per_shift: Decimal


@dataclass(frozen=True)
class WorkloadImbalance:
    employee_id: int
    hours: Decimal
    delta: Decimal

    @property
    def direction(self) -> str:
        return "over" if self.delta > 0 else "under"
