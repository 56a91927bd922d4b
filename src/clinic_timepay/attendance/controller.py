from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.serializers import attendance_to_dict
from ..container import Container
from ..core.exceptions import ValidationError


def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data


def _employee_and_date(data: dict) -> tuple[int, date]:
    try:
        employee_id = int(data["employee_id"])
    except (KeyError, TypeError, ValueError):
        raise ValidationError("employee_id is required") from None
    return employee_id, parse_iso_date(str(data.get("date") or ""))


def _time_field(data: dict) -> str:
    value = data.get("time")
    if not value:
        raise ValidationError("time is required (HH:mm:ss)")
    return str(value)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.post("/api/attendance/clock-in", endpoint="attendance_clock_in")
    def clock_in():
        data = _payload()
        employee_id, work_date = _employee_and_date(data)
        record = service.clock_in(employee_id, work_date, _time_field(data))
        return jsonify(attendance_to_dict(record)), 201

    @app.post("/api/attendance/clock-out", endpoint="attendance_clock_out")
    def clock_out():
        data = _payload()
        employee_id, work_date = _employee_and_date(data)
        record = service.clock_out(employee_id, work_date, _time_field(data))
        return jsonify(attendance_to_dict(record))

    @app.post("/api/attendance/scan", endpoint="attendance_scan")
    def scan():
        data = _payload()
        employee_id, work_date = _employee_and_date(data)
        record = service.record_scan(employee_id, work_date, _time_field(data))
        return jsonify(attendance_to_dict(record))
