from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from habit_analytics.dates import ONE_DAY
from habit_analytics.log_index import LogIndex

DEFAULT_MAX_LOOKBACK = 365
DEFAULT_MAX_RECOVERY_WINDOW = 30
DEFAULT_FALLS_LIMIT = 10


@dataclass(frozen=True)
class Fall:
    date: str
    streak_before: int
    recovery_days: Optional[int]
    notes: Optional[str] = None


@dataclass(frozen=True)
class FallsSummary:
    total_falls: int
    recovered: int
    unrecovered: int
    average_recovery_days: Optional[float]
    longest_streak_lost: int


def _streak_before(index: LogIndex, subject_id: str, fall_day: date, max_lookback: int) -> int:
    count = 0
    current = fall_day - ONE_DAY
    while count < max_lookback and index.succeeded_on(subject_id, current):
        count += 1
        current -= ONE_DAY
    return count


def _recovery_days(index: LogIndex, subject_id: str, fall_day: date, today: date, window: int) -> Optional[int]:
    for offset in range(1, window + 1):
        day = fall_day + timedelta(days=offset)
        if day > today:
            break
        if index.succeeded_on(subject_id, day):
            return offset
    return None


def falls_history(
    index: LogIndex,
    subject_id: str,
    today: date,
    max_lookback: int = DEFAULT_MAX_LOOKBACK,
    max_recovery_window: int = DEFAULT_MAX_RECOVERY_WINDOW,
    limit: Optional[int] = DEFAULT_FALLS_LIMIT,
) -> list[Fall]:
    """Every failed day in the lookback window, most recent first.

    ``streak_before`` is the run of successes right before the fall and
    ``recovery_days`` the distance to the next success, or ``None`` when
    none was recorded within ``max_recovery_window`` days.
    """
    earliest = today - timedelta(days=max_lookback)
    falls = []
    for day in reversed(index.dates_for_subject(subject_id)):
        if limit is not None and len(falls) >= limit:
            break
        if day > today:
            continue
        if day < earliest:
            break
        record = index.get(subject_id, day)
        if record.succeeded:
            continue
        falls.append(
            Fall(
                date=day.isoformat(),
                streak_before=_streak_before(index, subject_id, day, max_lookback),
                recovery_days=_recovery_days(index, subject_id, day, today, max_recovery_window),
                notes=record.notes,
            )
        )
    return falls


def summarize_falls(falls: Sequence[Fall]) -> FallsSummary:
    recoveries = [fall.recovery_days for fall in falls if fall.recovery_days is not None]
    average = round(sum(recoveries) / len(recoveries), 1) if recoveries else None
    return FallsSummary(
        total_falls=len(falls),
        recovered=len(recoveries),
        unrecovered=len(falls) - len(recoveries),
        average_recovery_days=average,
        longest_streak_lost=max((fall.streak_before for fall in falls), default=0),
    )
