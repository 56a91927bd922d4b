from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollEntry


class PayrollRepository(Protocol):
    def list_payroll(
        self,
        *,
        employee_id: Optional[int] = None,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> Sequence[PayrollEntry]:
        """Entries whose period starts within [period_start, period_end] when given."""

        raise NotImplementedError

    def get_by_id(self, payroll_id: int) -> Optional[PayrollEntry]:
        raise NotImplementedError

    def create_payroll(self, entry: PayrollEntry) -> PayrollEntry:
        raise NotImplementedError

    def update_status(self, payroll_id: int, status: PayrollStatus) -> PayrollEntry:
        raise NotImplementedError
