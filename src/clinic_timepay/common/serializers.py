"""JSON-friendly views of the domain entities.

Decimals are rendered as strings so cents survive the round trip.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..attendance.model import AttendanceRecord
from ..payroll.model import PayrollEntry
from ..schedules.model import ShiftAssignment, WorkloadImbalance, WorkloadStat
from .datetime_utils import format_clock_time, format_date
from .results import BatchResult


def _dec(value: Optional[Decimal]) -> Optional[str]:
    return None if value is None else str(value)


def attendance_to_dict(r: AttendanceRecord) -> dict:
    return {
        "attendance_id": r.attendance_id,
        "employee_id": r.employee_id,
        "date": format_date(r.work_date),
        "clock_in": format_clock_time(r.clock_in),
        "clock_out": format_clock_time(r.clock_out) if r.clock_out else None,
        "status": r.status.value,
        "late_minutes": r.late_minutes,
        "total_hours": _dec(r.total_hours),
        "regular_hours": _dec(r.regular_hours),
        "overtime_hours": _dec(r.overtime_hours),
    }


def schedule_to_dict(s: ShiftAssignment) -> dict:
    return {
        "schedule_id": s.schedule_id,
        "employee_id": s.employee_id,
        "date": format_date(s.work_date),
        "start_time": format_clock_time(s.start_time),
        "end_time": format_clock_time(s.end_time),
        "site_id": s.site_id,
        "status": s.status.value,
    }


def payroll_to_dict(p: PayrollEntry) -> dict:
    d = p.deductions
    return {
        "payroll_id": p.payroll_id,
        "employee_id": p.employee_id,
        "period_start": format_date(p.period_start),
        "period_end": format_date(p.period_end),
        "regular_hours": _dec(p.regular_hours),
        "overtime_hours": _dec(p.overtime_hours),
        "regular_pay": _dec(p.regular_pay),
        "overtime_pay": _dec(p.overtime_pay),
        "gross_pay": _dec(p.gross_pay),
        "deductions": {
            "withholding_tax": _dec(d.withholding_tax),
            "social_insurance": _dec(d.social_insurance),
            "health_insurance": _dec(d.health_insurance),
            "housing_fund": _dec(d.housing_fund),
            "total": _dec(d.total),
        },
        "net_pay": _dec(p.net_pay),
        "status": p.status.value,
    }


def workload_to_dict(s: WorkloadStat) -> dict:
    return {
        "employee_id": s.employee_id,
        "total_hours": _dec(s.total_hours),
        "total_shifts": s.total_shifts,
        "reliability": s.reliability,
        "avg_hours_per_shift": _dec(s.avg_hours_per_shift),
    }


def imbalance_to_dict(i: WorkloadImbalance) -> dict:
    return {
        "employee_id": i.employee_id,
        "hours": _dec(i.hours),
        "delta": _dec(i.delta),
        "direction": i.direction,
    }


def batch_to_dict(result: BatchResult, item_to_dict) -> dict[str, Any]:
    out = result.summary()
    out["items"] = [item_to_dict(item) for item in result.created]
    out["skipped_items"] = [{"item": s.item, "reason": s.reason} for s in result.skipped]
    return out
