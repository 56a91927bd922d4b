from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the persistence collaborator."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class ScheduleStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    MISSED = "missed"


class PayrollStatus(str, Enum):
    """Payroll lifecycle. Only ever advances pending -> processed -> paid."""

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"

    def next_status(self) -> "PayrollStatus | None":
        order = list(PayrollStatus)
        idx = order.index(self)
        return order[idx + 1] if idx + 1 < len(order) else None


class OvernightPolicy(str, Enum):
    """How a clock-out earlier than the clock-in is interpreted."""

    REJECT = "reject"
    NEXT_DAY = "next_day"
