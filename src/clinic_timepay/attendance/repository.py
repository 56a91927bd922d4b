from __future__ import annotations

from datetime import date
from typing import Any, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_attendance(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_attendance(self, record: AttendanceRecord) -> AttendanceRecord:
        """Persist a new record and return it with its id."""

        raise NotImplementedError

    def update_attendance(self, attendance_id: int, **patch: Any) -> AttendanceRecord:
        """Apply a field patch (clock-out and hour buckets) and return the stored record."""

        raise NotImplementedError
