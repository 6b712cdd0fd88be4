from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from habit_analytics.dates import check_range, days_between, month_bounds
from habit_analytics.log_index import LogIndex


@dataclass(frozen=True)
class PeriodStats:
    success_days: int
    total_days: int
    percentage: int


@dataclass(frozen=True)
class WeekdayStats:
    weekday: int
    total: int
    success: int
    success_rate: int


def percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    # half-up, not banker's rounding
    return int(part * 100 / whole + 0.5)


def _count_successes(index: LogIndex, subject_id: str, start: date, end: date) -> int:
    count = 0
    for day in index.dates_for_subject(subject_id):
        if day < start:
            continue
        if day > end:
            break
        if index.succeeded_on(subject_id, day):
            count += 1
    return count


def monthly_stats(index: LogIndex, subject_id: str, month_start: date, month_end: date, today: date) -> PeriodStats:
    """Success rate over a period, counting only days up to ``today``.

    Unmarked days count against the rate. Future days in the period do
    not. A period that has not started yet has no days at all, so it
    reports zero days rather than its full length.
    """
    check_range(month_start, month_end)
    if today < month_start:
        return PeriodStats(0, 0, 0)
    end = min(month_end, today)
    total_days = days_between(month_start, end)
    success_days = _count_successes(index, subject_id, month_start, end)
    return PeriodStats(success_days, total_days, percent(success_days, total_days))


def current_month_stats(index: LogIndex, subject_id: str, today: date) -> PeriodStats:
    start, end = month_bounds(today)
    return monthly_stats(index, subject_id, start, end, today)


def weekly_success_rate(index: LogIndex, subject_ids: Iterable[str], week_start: date, week_end: date) -> int:
    """Aggregate success rate over every subject, one slot per subject per day.

    Unlike :func:`monthly_stats`, every slot in the range counts, marked or
    not and past or future.
    """
    check_range(week_start, week_end)
    subjects = list(dict.fromkeys(subject_ids))
    slots = days_between(week_start, week_end) * len(subjects)
    successes = sum(_count_successes(index, subject_id, week_start, week_end) for subject_id in subjects)
    return percent(successes, slots)


def weekday_breakdown(index: LogIndex, subject_id: str, today: date) -> list[WeekdayStats]:
    totals = [0] * 7
    successes = [0] * 7
    for day in index.dates_for_subject(subject_id):
        if day > today:
            break
        weekday = day.weekday()
        totals[weekday] += 1
        if index.succeeded_on(subject_id, day):
            successes[weekday] += 1
    return [
        WeekdayStats(weekday, totals[weekday], successes[weekday], percent(successes[weekday], totals[weekday]))
        for weekday in range(7)
    ]
