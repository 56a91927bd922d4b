from __future__ import annotations

from datetime import time
from decimal import Decimal

from ...common.datetime_utils import on_nominal_day
from ...common.money import round_half_up
from ...core.enums import AttendanceStatus
from ..model import ClockInDecision
from .base import AttendanceStrategy


class LateStrategy(AttendanceStrategy):
    """Late clock-in; lateness is measured from the end of the grace period."""

    def decide_clock_in(self, *, clock_in: time, grace_period_end: time) -> ClockInDecision:
        seconds = (on_nominal_day(clock_in) - on_nominal_day(grace_period_end)).total_seconds()
        minutes = round_half_up(Decimal(int(seconds)) / Decimal(60))
        return ClockInDecision(status=AttendanceStatus.LATE, late_minutes=minutes)
