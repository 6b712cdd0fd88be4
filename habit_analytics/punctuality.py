from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from habit_analytics.dates import daterange
from habit_analytics.errors import InvalidTimeFormat
from habit_analytics.log_index import LogIndex
from habit_analytics.period_stats import percent
from habit_analytics.records import SkippedRecord
from habit_analytics.time_of_day import circular_diff, format_time, parse_time

logger = logging.getLogger(__name__)

DEFAULT_TARGET_TIME = "06:00"
TREND_THRESHOLD_MINUTES = 5


@dataclass(frozen=True)
class WakeDiff:
    date: date
    actual_minutes: int
    target_minutes: int
    diff: int


@dataclass(frozen=True)
class WakeDay:
    date: str
    actual_minutes: Optional[int]
    target_minutes: int
    diff: Optional[int]
    woke_up: bool


@dataclass(frozen=True)
class PunctualitySummary:
    average_diff: int
    on_time_percentage: int
    earliest: str
    latest: str
    total_days: int


@dataclass(frozen=True)
class WeekdayWakeStats:
    weekday: int
    total: int
    success: int
    success_rate: int
    average_diff: int


@dataclass(frozen=True)
class WakeTrend:
    kind: str
    diff_minutes: int


def _mean(values) -> int:
    return int(round(sum(values) / len(values))) if values else 0


def _target_for(record, default_target_minutes: int, skipped: list) -> int:
    if not record.target_time:
        return default_target_minutes
    try:
        return parse_time(record.target_time)
    except InvalidTimeFormat as exc:
        logger.warning("Bad target time for %s on %s: %s", record.subject_id, record.date, exc)
        skipped.append(SkippedRecord.of(record, exc))
        return default_target_minutes


def wake_diffs(
    index: LogIndex,
    subject_id: str,
    default_target: str = DEFAULT_TARGET_TIME,
    skipped: Optional[list] = None,
) -> list[WakeDiff]:
    """Circular wake-up offsets for every record that has an actual time.

    Records with an unreadable actual time are left out and, when
    ``skipped`` is given, appended to it.
    """
    if skipped is None:
        skipped = []
    default_minutes = parse_time(default_target)
    diffs = []
    for day in index.dates_for_subject(subject_id):
        record = index.get(subject_id, day)
        if not record.actual_time:
            continue
        try:
            actual = parse_time(record.actual_time)
        except InvalidTimeFormat as exc:
            logger.warning("Skipping wake time for %s on %s: %s", record.subject_id, record.date, exc)
            skipped.append(SkippedRecord.of(record, exc))
            continue
        target = _target_for(record, default_minutes, skipped)
        diffs.append(WakeDiff(day, actual, target, circular_diff(target, actual)))
    return diffs


def punctuality_summary(diffs: list[WakeDiff]) -> Optional[PunctualitySummary]:
    if not diffs:
        return None
    values = [item.diff for item in diffs]
    actuals = [item.actual_minutes for item in diffs]
    return PunctualitySummary(
        average_diff=_mean(values),
        on_time_percentage=percent(sum(1 for value in values if value <= 0), len(values)),
        earliest=format_time(min(actuals)),
        latest=format_time(max(actuals)),
        total_days=len(diffs),
    )


def daily_wake_series(
    index: LogIndex,
    subject_id: str,
    today: date,
    days: int = 30,
    default_target: str = DEFAULT_TARGET_TIME,
    diffs: Optional[list[WakeDiff]] = None,
) -> list[WakeDay]:
    if diffs is None:
        diffs = wake_diffs(index, subject_id, default_target)
    by_day = {item.date: item for item in diffs}
    default_minutes = parse_time(default_target)
    series = []
    for day in daterange(today - timedelta(days=days - 1), today):
        record = index.get(subject_id, day)
        timed = by_day.get(day)
        if timed is not None:
            target = timed.target_minutes
        elif record is not None:
            target = _target_for(record, default_minutes, [])
        else:
            target = default_minutes
        series.append(
            WakeDay(
                date=day.isoformat(),
                actual_minutes=timed.actual_minutes if timed else None,
                target_minutes=target,
                diff=timed.diff if timed else None,
                woke_up=bool(record and record.succeeded),
            )
        )
    return series


def weekday_wake_stats(
    index: LogIndex,
    subject_id: str,
    default_target: str = DEFAULT_TARGET_TIME,
    diffs: Optional[list[WakeDiff]] = None,
) -> list[WeekdayWakeStats]:
    if diffs is None:
        diffs = wake_diffs(index, subject_id, default_target)
    totals = [0] * 7
    successes = [0] * 7
    by_weekday: list[list[int]] = [[] for _ in range(7)]
    for day in index.dates_for_subject(subject_id):
        totals[day.weekday()] += 1
        if index.succeeded_on(subject_id, day):
            successes[day.weekday()] += 1
    for item in diffs:
        by_weekday[item.date.weekday()].append(item.diff)
    return [
        WeekdayWakeStats(
            weekday=weekday,
            total=totals[weekday],
            success=successes[weekday],
            success_rate=percent(successes[weekday], totals[weekday]),
            average_diff=_mean(by_weekday[weekday]),
        )
        for weekday in range(7)
    ]


def wake_trend(
    index: LogIndex,
    subject_id: str,
    today: date,
    threshold: int = TREND_THRESHOLD_MINUTES,
    default_target: str = DEFAULT_TARGET_TIME,
    diffs: Optional[list[WakeDiff]] = None,
) -> WakeTrend:
    """Compare the last seven days with the seven before them.

    Weeks are compared by mean offset from target, so a target change or a
    wake time past midnight does not read as a shift of many hours.
    """
    if diffs is None:
        diffs = wake_diffs(index, subject_id, default_target)
    this_week_start = today - timedelta(days=6)
    last_week_start = today - timedelta(days=13)
    this_week = []
    last_week = []
    for item in diffs:
        if this_week_start <= item.date <= today:
            this_week.append(item.diff)
        elif last_week_start <= item.date < this_week_start:
            last_week.append(item.diff)
    if not this_week or not last_week:
        return WakeTrend("neutral", 0)
    change = round(sum(this_week) / len(this_week) - sum(last_week) / len(last_week))
    if change < -threshold:
        return WakeTrend("improvement", abs(change))
    if change > threshold:
        return WakeTrend("regression", change)
    return WakeTrend("stable", 0)
