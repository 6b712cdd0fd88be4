from __future__ import annotations

from dataclasses import asdict
from datetime import date, timedelta

from fastapi import APIRouter, HTTPException

from habit_analytics.dates import month_bounds, week_bounds
from habit_analytics.period_stats import monthly_stats, weekly_success_rate
from habit_api.schemas import (
    MonthlyStatsRequest,
    MonthlyStatsResponse,
    WeeklyStatsRequest,
    WeeklyStatsResponse,
)
from habit_api.services.snapshot import build_index, resolve_today, skipped_payload
from habit_api.settings import get_settings

router = APIRouter()


def _parse_month(raw: str) -> tuple[date, date]:
    year, month = (int(part) for part in raw.split("-"))
    try:
        first = date(year, month, 1)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid month") from exc
    return month_bounds(first)


@router.post("/v1/stats/monthly", response_model=MonthlyStatsResponse)
async def monthly(payload: MonthlyStatsRequest):
    today = resolve_today(payload.today)
    if payload.month:
        start, end = _parse_month(payload.month)
    else:
        start, end = month_bounds(today)
    index = build_index(payload)
    stats = monthly_stats(index, payload.subject_id, start, end, today)
    return {
        "subject_id": payload.subject_id,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "stats": asdict(stats),
        "skipped": skipped_payload(index),
    }


@router.post("/v1/stats/weekly", response_model=WeeklyStatsResponse)
async def weekly(payload: WeeklyStatsRequest):
    today = resolve_today(payload.today)
    if payload.week_start:
        start, end = payload.week_start, payload.week_start + timedelta(days=6)
    else:
        start, end = week_bounds(today, get_settings().week_start)
    index = build_index(payload)
    return {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "percentage": weekly_success_rate(index, payload.subject_ids, start, end),
        "skipped": skipped_payload(index),
    }
