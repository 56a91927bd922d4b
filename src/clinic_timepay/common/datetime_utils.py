from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Iterator, Union

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError

TimeLike = Union[str, time]

# Clock times are compared on one fixed nominal day.
NOMINAL_DAY = date(2000, 1, 1)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected yyyy-MM-dd") from None


def parse_clock_time(value: TimeLike) -> time:
    """Accept ``HH:mm:ss`` (or ``HH:mm``) strings and ``datetime.time`` values."""
    if isinstance(value, time):
        return value
    if isinstance(value, str):
        for fmt in (TIME_FORMAT, "%H:%M"):
            try:
                return datetime.strptime(value.strip(), fmt).time()
            except ValueError:
                continue
    raise ValidationError(f"Invalid time {value!r}, expected HH:mm:ss")


def format_clock_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def on_nominal_day(value: time) -> datetime:
    return datetime.combine(NOMINAL_DAY, value)


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date in [start, end] in order."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
