from __future__ import annotations

from datetime import date, timedelta

from habit_analytics.log_index import LogIndex
from habit_analytics.records import LogRecord


def rec(subject_id, day, succeeded=True, **extra):
    return LogRecord(subject_id=subject_id, date=day, succeeded=succeeded, **extra)


def days_from(start: str, count: int) -> list[str]:
    first = date.fromisoformat(start)
    return [(first + timedelta(days=offset)).isoformat() for offset in range(count)]


def run(subject_id, start: str, count: int, succeeded=True):
    return [rec(subject_id, day, succeeded) for day in days_from(start, count)]


def index_of(*records, **kwargs):
    return LogIndex.build(list(records), **kwargs)
