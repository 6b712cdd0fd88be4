from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from habit_analytics.errors import InvalidDateFormat, InvalidDateRange

ONE_DAY = timedelta(days=1)


def parse_iso_date(value) -> date:
    if isinstance(value, datetime):
        raise InvalidDateFormat(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateFormat(value)
    raw = value.strip()
    # fromisoformat alone also accepts "20240105" and week dates on 3.11+
    if len(raw) != 10 or raw[4] != "-" or raw[7] != "-":
        raise InvalidDateFormat(value)
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidDateFormat(value) from exc


def check_range(start: date, end: date) -> None:
    if start > end:
        raise InvalidDateRange(start, end)


def daterange(start: date, end: date) -> list[date]:
    days = []
    current = start
    while current <= end:
        days.append(current)
        current += ONE_DAY
    return days


def days_between(start: date, end: date) -> int:
    return (end - start).days + 1


def month_bounds(day: date) -> tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return date(day.year, day.month, 1), date(day.year, day.month, last)


def week_bounds(day: date, week_start: int = 0) -> tuple[date, date]:
    offset = (day.weekday() - week_start) % 7
    start = day - timedelta(days=offset)
    return start, start + timedelta(days=6)
