from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..common.money import ZERO, round2, round_half_up, to_decimal
from ..core import constants
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .model import ShiftAssignment, WorkloadImbalance, WorkloadStat


def reliability_score(attended_days: int, scheduled_days: int) -> int:
    """Percentage of scheduled days attended; 100 with no history."""
    if scheduled_days <= 0:
        return constants.DEFAULT_RELIABILITY
    return round_half_up(Decimal(100 * attended_days) / Decimal(scheduled_days))


def build_workload_stats(
    employees: Iterable[Employee],
    schedules: Iterable[ShiftAssignment],
    attendance: Iterable[AttendanceRecord],
) -> dict[int, WorkloadStat]:
    """Per-employee hours, shift count and reliability over the given window.

    Only on-time (``present``) days count as attended.
    """
    hours: dict[int, Decimal] = defaultdict(lambda: ZERO)
    shifts: dict[int, int] = defaultdict(int)
    for s in schedules:
        hours[s.employee_id] += s.duration_hours
        shifts[s.employee_id] += 1

    present: dict[int, int] = defaultdict(int)
    for r in attendance:
        if r.status == AttendanceStatus.PRESENT:
            present[r.employee_id] += 1

    stats: dict[int, WorkloadStat] = {}
    for e in employees:
        total = round2(hours[e.employee_id])
        count = shifts[e.employee_id]
        stats[e.employee_id] = WorkloadStat(
            employee_id=e.employee_id,
            total_hours=total,
            total_shifts=count,
            reliability=reliability_score(present[e.employee_id], count),
            avg_hours_per_shift=round2(total / count) if count else ZERO,
        )
    return stats


def find_imbalances(
    assignments: Sequence[ShiftAssignment],
    *,
    threshold: Decimal | int = constants.IMBALANCE_THRESHOLD_HOURS,
) -> list[WorkloadImbalance]:
    """Employees whose scheduled hours stray from the mean by more than ``threshold``."""
    hours: dict[int, Decimal] = defaultdict(lambda: ZERO)
    for a in assignments:
        hours[a.employee_id] += a.duration_hours
    if not hours:
        return []

    mean = sum(hours.values(), ZERO) / len(hours)
    limit = to_decimal(threshold)
    out = []
    for employee_id, total in hours.items():
        delta = total - mean
        if abs(delta) > limit:
            out.append(WorkloadImbalance(employee_id=employee_id, hours=round2(total), delta=round2(delta)))
    out.sort(key=lambda i: i.delta, reverse=True)
    return out
