from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one date.

    Hour buckets stay ``None`` until the record is clocked out.
    """

    attendance_id: Optional[int]
    employee_id: int
    work_date: date
    clock_in: time
    status: AttendanceStatus
    clock_out: Optional[time] = None
    late_minutes: int = 0
    total_hours: Optional[Decimal] = None
    regular_hours: Optional[Decimal] = None
    overtime_hours: Optional[Decimal] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None


@dataclass(frozen=True)
class ClockInDecision:
    status: AttendanceStatus
    late_minutes: int = 0


@dataclass(frozen=True)
class WorkedHours:
    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
