from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from habit_analytics.recovery import falls_history, summarize_falls
from habit_api.schemas import FallsRequest, FallsResponse
from habit_api.services.snapshot import build_index, resolve_today, skipped_payload
from habit_api.settings import get_settings

router = APIRouter()


@router.post("/v1/falls", response_model=FallsResponse)
async def falls(payload: FallsRequest):
    settings = get_settings()
    today = resolve_today(payload.today)
    index = build_index(payload)
    items = falls_history(
        index,
        payload.subject_id,
        today,
        max_lookback=settings.max_lookback,
        max_recovery_window=settings.max_recovery_window,
        limit=payload.limit or settings.falls_limit,
    )
    return {
        "subject_id": payload.subject_id,
        "items": [asdict(item) for item in items],
        "summary": asdict(summarize_falls(items)),
        "skipped": skipped_payload(index),
    }
