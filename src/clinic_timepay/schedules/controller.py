from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_date, parse_iso_date
from ..common.serializers import batch_to_dict, imbalance_to_dict, schedule_to_dict, workload_to_dict
from ..container import Container
from ..core.exceptions import ValidationError
from .model import AutoScheduleSettings


def _range_args():
    return parse_iso_date(request.args.get("start", "")), parse_iso_date(request.args.get("end", ""))


def _pairs_to_list(pairs) -> list:
    return [[schedule_to_dict(a), schedule_to_dict(b)] for a, b in pairs]


def _as_bool(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def register(app: Flask, container: Container) -> None:
    service = container.schedule_service

    @app.get("/api/schedules/conflicts", endpoint="schedules_conflicts")
    def conflicts():
        # ?date= for one day, ?start=&end= for a calendar range (only days with conflicts).
        if "date" in request.args:
            work_date = parse_iso_date(request.args["date"])
            return jsonify({"date": format_date(work_date), "conflicts": _pairs_to_list(service.conflicts_for_day(work_date))})

        start, end = _range_args()
        by_day = service.conflicts_in_range(start=start, end=end)
        return jsonify(
            {
                "start": format_date(start),
                "end": format_date(end),
                "days": [{"date": format_date(day), "conflicts": _pairs_to_list(pairs)} for day, pairs in by_day.items()],
            }
        )

    @app.get("/api/schedules/workload", endpoint="schedules_workload")
    def workload():
        start, end = _range_args()
        stats = service.workload_stats(start=start, end=end)
        return jsonify([workload_to_dict(s) for s in stats.values()])

    @app.get("/api/schedules/imbalances", endpoint="schedules_imbalances")
    def imbalances():
        start, end = _range_args()
        return jsonify([imbalance_to_dict(i) for i in service.imbalances(start=start, end=end)])

    @app.post("/api/schedules/auto", endpoint="schedules_auto")
    def auto_schedule():
        data = request.get_json(silent=True) or {}
        try:
            options = AutoScheduleSettings(
                start_date=parse_iso_date(str(data.get("start_date") or "")),
                end_date=parse_iso_date(str(data.get("end_date") or "")),
                work_days_per_week=int(data.get("work_days_per_week", 5)),
                shift_hours=int(data.get("shift_hours", 8)),
                include_weekends=_as_bool(data.get("include_weekends"), False),
                balance_workload=_as_bool(data.get("balance_workload"), True),
            )
        except (TypeError, ValueError):
            raise ValidationError("work_days_per_week and shift_hours must be integers") from None

        result = service.auto_schedule(options)
        return jsonify(batch_to_dict(result, schedule_to_dict)), 201
