from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ShiftAssignment


class ScheduleRepository(Protocol):
    def list_schedules(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[ShiftAssignment]:
        raise NotImplementedError

    def create_schedule(self, assignment: ShiftAssignment) -> ShiftAssignment:
        """Persist a new assignment and return it with its id."""

        raise NotImplementedError
