from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the clock-in strategy from the grace period rule."""

    def for_clock_in(self, *, clock_in: time, grace_period_end: time) -> AttendanceStrategy:
        if clock_in <= grace_period_end:
            return PresentStrategy()
        return LateStrategy()
