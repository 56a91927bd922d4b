"""Attendance classification and payable-hour computation.

Clock times are plain ``datetime.time`` values on one nominal calendar day.
A late arrival is paid from the actual clock-in time; lateness only shows up
in the status and ``late_minutes``.
"""

from __future__ import annotations

from datetime import time, timedelta
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import on_nominal_day
from ..common.money import ZERO, round2, to_decimal
from ..core.enums import OvernightPolicy
from ..core.exceptions import OvernightShiftError
from .factory import AttendanceStrategyFactory
from .model import ClockInDecision, WorkedHours

_default_factory = AttendanceStrategyFactory()


def classify(
    clock_in: time,
    grace_period_end: time,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> ClockInDecision:
    factory = factory or _default_factory
    strategy = factory.for_clock_in(clock_in=clock_in, grace_period_end=grace_period_end)
    return strategy.decide_clock_in(clock_in=clock_in, grace_period_end=grace_period_end)


def compute_hours(
    clock_in: time,
    clock_out: time,
    standard_shift_hours: Decimal | int = 8,
    *,
    overnight_policy: OvernightPolicy = OvernightPolicy.REJECT,
) -> WorkedHours:
    """Split the worked interval into regular and overtime hours.

    A clock-out earlier than the clock-in either raises ``OvernightShiftError``
    or, under ``OvernightPolicy.NEXT_DAY``, is read as the following day.
    """
    start = on_nominal_day(clock_in)
    end = on_nominal_day(clock_out)
    if end < start:
        if overnight_policy is not OvernightPolicy.NEXT_DAY:
            raise OvernightShiftError(
                f"Clock-out {clock_out:%H:%M:%S} is earlier than clock-in {clock_in:%H:%M:%S}"
            )
        end += timedelta(days=1)

    total = Decimal(int((end - start).total_seconds())) / Decimal(3600)
    standard = to_decimal(standard_shift_hours)
    regular = min(total, standard)
    overtime = max(ZERO, total - standard)
    return WorkedHours(
        total_hours=round2(total),
        regular_hours=round2(regular),
        overtime_hours=round2(overtime),
    )

