from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.serializers import batch_to_dict, payroll_to_dict
from ..container import Container
from ..core.enums import PayrollStatus
from ..core.exceptions import ValidationError
from .service import month_period


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.post("/api/payroll/generate", endpoint="payroll_generate")
    def generate():
        data = request.get_json(silent=True) or {}
        if data.get("month"):
            try:
                year_s, month_s = str(data["month"]).split("-")
                period_start, period_end = month_period(int(year_s), int(month_s))
            except ValueError:
                raise ValidationError("month must look like yyyy-MM") from None
        else:
            period_start = parse_iso_date(str(data.get("period_start") or ""))
            period_end = parse_iso_date(str(data.get("period_end") or ""))

        result = service.generate_for_period(period_start=period_start, period_end=period_end)
        return jsonify(batch_to_dict(result, payroll_to_dict))

    @app.post("/api/payroll/<int:payroll_id>/status", endpoint="payroll_status")
    def advance_status(payroll_id: int):
        data = request.get_json(silent=True) or {}
        try:
            target = PayrollStatus(str(data.get("status") or ""))
        except ValueError:
            raise ValidationError("status must be one of pending, processed, paid") from None
        entry = service.advance_status(payroll_id, target)
        return jsonify(payroll_to_dict(entry))
