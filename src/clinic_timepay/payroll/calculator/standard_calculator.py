from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...common.money import ZERO, round2, to_decimal
from ...core.constants import OVERTIME_MULTIPLIER
from ..deductions import DeductionPolicy
from ..model import PayrollCalculation
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: regular hours at the hourly rate, overtime at 1.5x, then statutory deductions.

    Every intermediate is rounded to cents; gross and net are built from the
    rounded parts so they always add up exactly.
    """

    def __init__(self, policy: Optional[DeductionPolicy] = None):
        self._policy = policy or DeductionPolicy()

    def calculate(self, *, hourly_rate: Decimal, records: Iterable[AttendanceRecord]) -> PayrollCalculation:
        rate = to_decimal(hourly_rate)
        regular_hours = ZERO
        overtime_hours = ZERO
        for r in records:
            # Open records (not clocked out) carry no payable hours yet.
            if r.total_hours is None:
                continue
            overtime = r.overtime_hours or ZERO
            regular_hours += r.total_hours - overtime
            overtime_hours += overtime

        regular_hours = round2(regular_hours)
        overtime_hours = round2(overtime_hours)
        regular_pay = round2(regular_hours * rate)
        overtime_pay = round2(overtime_hours * rate * Decimal(OVERTIME_MULTIPLIER))
        gross_pay = regular_pay + overtime_pay

        deductions = self._policy.breakdown(gross_pay)
        net_pay = gross_pay - deductions.total

        return PayrollCalculation(
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            gross_pay=gross_pay,
            deductions=deductions,
            net_pay=net_pay,
        )
