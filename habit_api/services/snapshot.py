from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from habit_analytics.log_index import LogIndex
from habit_api.settings import get_settings


def resolve_today(today: date | None) -> date:
    if today is not None:
        return today
    return datetime.now(ZoneInfo(get_settings().timezone)).date()


def build_index(payload) -> LogIndex:
    records = [item.to_record() for item in payload.records]
    return LogIndex.build(records, on_duplicate=get_settings().duplicate_policy)


def skipped_payload(index: LogIndex, extra=()) -> list[dict]:
    return [
        {
            "subject_id": item.subject_id,
            "date": item.date,
            "error": item.reason,
        }
        for item in (*index.skipped, *extra)
    ]
