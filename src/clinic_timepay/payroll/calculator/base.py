from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ..model import PayrollCalculation


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, *, hourly_rate: Decimal, records: Iterable[AttendanceRecord]) -> PayrollCalculation:
        raise NotImplementedError
