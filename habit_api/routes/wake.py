from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from habit_analytics import punctuality
from habit_analytics.period_stats import current_month_stats
from habit_analytics.streaks import current_streak, longest_streak
from habit_analytics.time_of_day import circular_diff, parse_time
from habit_api.schemas import (
    TimeDiffRequest,
    TimeDiffResponse,
    WakeAnalyticsRequest,
    WakeAnalyticsResponse,
)
from habit_api.services.snapshot import build_index, resolve_today, skipped_payload
from habit_api.settings import get_settings

router = APIRouter()


@router.post("/v1/wake/diff", response_model=TimeDiffResponse)
async def wake_diff(payload: TimeDiffRequest):
    target = parse_time(payload.target_time)
    actual = parse_time(payload.actual_time)
    return {"target_minutes": target, "actual_minutes": actual, "diff": circular_diff(target, actual)}


@router.post("/v1/wake/analytics", response_model=WakeAnalyticsResponse)
async def wake_analytics(payload: WakeAnalyticsRequest):
    default_target = get_settings().default_target_time
    today = resolve_today(payload.today)
    index = build_index(payload)
    subject_id = payload.subject_id

    bad_times = []
    diffs = punctuality.wake_diffs(index, subject_id, default_target, skipped=bad_times)
    summary = punctuality.punctuality_summary(diffs)
    skipped = skipped_payload(index, bad_times)
    return {
        "subject_id": subject_id,
        "today": today.isoformat(),
        "current_streak": current_streak(index, subject_id, today),
        "longest_streak": longest_streak(index, subject_id, today),
        "monthly": asdict(current_month_stats(index, subject_id, today)),
        "punctuality": asdict(summary) if summary else None,
        "series": [
            asdict(day)
            for day in punctuality.daily_wake_series(index, subject_id, today, payload.days, default_target, diffs=diffs)
        ],
        "weekdays": [asdict(item) for item in punctuality.weekday_wake_stats(index, subject_id, default_target, diffs=diffs)],
        "trend": asdict(punctuality.wake_trend(index, subject_id, today, default_target=default_target, diffs=diffs)),
        "skipped": skipped,
    }
