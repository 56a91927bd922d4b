from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time

from ..model import ClockInDecision


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a clock-in is turned into a status."""

    @abstractmethod
    def decide_clock_in(self, *, clock_in: time, grace_period_end: time) -> ClockInDecision:
        raise NotImplementedError
