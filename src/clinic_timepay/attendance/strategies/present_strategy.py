from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from ..model import ClockInDecision
from .base import AttendanceStrategy


class PresentStrategy(AttendanceStrategy):
    """Clock-in at or before the end of the grace period."""

    def decide_clock_in(self, *, clock_in: time, grace_period_end: time) -> ClockInDecision:
        return ClockInDecision(status=AttendanceStatus.PRESENT, late_minutes=0)
