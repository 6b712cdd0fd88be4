from __future__ import annotations

from datetime import date
from typing import Optional

from habit_analytics.dates import ONE_DAY
from habit_analytics.log_index import LogIndex


def current_streak(index: LogIndex, subject_id: str, today: date) -> int:
    """Consecutive successful days ending today.

    An unmarked today is skipped so the streak still counts from
    yesterday. A failure today, or any unmarked or failed earlier day, ends
    the walk.
    """
    count = 0
    current = today
    if index.get(subject_id, today) is None:
        current -= ONE_DAY
    while index.succeeded_on(subject_id, current):
        count += 1
        current -= ONE_DAY
    return count


def longest_streak(index: LogIndex, subject_id: str, today: Optional[date] = None) -> int:
    best = 0
    run = 0
    previous = None
    for day in index.dates_for_subject(subject_id):
        if today is not None and day > today:
            break
        record = index.get(subject_id, day)
        if not record.succeeded:
            run = 0
        elif previous is not None and day - previous == ONE_DAY:
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


def streak_summary(index: LogIndex, subject_id: str, today: date) -> dict:
    return {
        "subject_id": subject_id,
        "current": current_streak(index, subject_id, today),
        "longest": longest_streak(index, subject_id, today),
    }
