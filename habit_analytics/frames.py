from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from habit_analytics.errors import InvalidOutcome
from habit_analytics.log_index import LogIndex
from habit_analytics.records import LogRecord, SkippedRecord
from habit_analytics.streaks import current_streak, longest_streak

logger = logging.getLogger(__name__)

OPTIONAL_COLUMNS = ("notes", "actual_time", "target_time")


def _cell(value):
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _date_cell(value):
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def records_from_frame(df: pd.DataFrame, skipped: Optional[list] = None) -> list[LogRecord]:
    """Build records from a long-format frame.

    Null outcomes are unmarked days. Rows with an unreadable outcome are
    left out and, when ``skipped`` is given, appended to it.
    """
    if skipped is None:
        skipped = []
    if df is None or df.empty:
        return []
    records = []
    for row in df.to_dict("records"):
        succeeded = _cell(row.get("succeeded"))
        if succeeded is None:
            continue
        payload = {
            "subject_id": row["subject_id"],
            "date": _date_cell(row["date"]),
            "succeeded": succeeded,
        }
        for column in OPTIONAL_COLUMNS:
            payload[column] = _cell(row.get(column))
        try:
            records.append(LogRecord.from_mapping(payload))
        except InvalidOutcome as exc:
            logger.warning("Skipping row for %s on %s: %s", payload["subject_id"], payload["date"], exc)
            skipped.append(SkippedRecord(str(payload["subject_id"]), payload["date"], exc))
    return records


def records_from_entries(df: pd.DataFrame, habit_keys: Iterable[str], skipped: Optional[list] = None) -> list[LogRecord]:
    """Turn a wide daily-entries frame (one 0/1 column per habit) into records."""
    if df is None or df.empty:
        return []
    keys = [key for key in habit_keys if key in df.columns]
    long = df.melt(id_vars=["date"], value_vars=keys, var_name="subject_id", value_name="succeeded")
    long = long.dropna(subset=["succeeded"])
    return records_from_frame(long, skipped)


def streak_table(index: LogIndex, today: date) -> pd.DataFrame:
    rows = [
        {
            "subject_id": subject_id,
            "current_streak": current_streak(index, subject_id, today),
            "longest_streak": longest_streak(index, subject_id, today),
        }
        for subject_id in index.subjects()
    ]
    table = pd.DataFrame(rows, columns=["subject_id", "current_streak", "longest_streak"])
    return table.sort_values(
        ["current_streak", "longest_streak", "subject_id"],
        ascending=[False, False, True],
        ignore_index=True,
    )
