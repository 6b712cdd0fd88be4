from __future__ import annotations

from fastapi import APIRouter

from habit_analytics.streaks import streak_summary
from habit_api.schemas import StreaksRequest, StreaksResponse
from habit_api.services.snapshot import build_index, resolve_today, skipped_payload

router = APIRouter()


@router.post("/v1/streaks", response_model=StreaksResponse)
async def streaks(payload: StreaksRequest):
    today = resolve_today(payload.today)
    index = build_index(payload)
    subject_ids = payload.subject_ids or index.subjects()
    return {
        "today": today.isoformat(),
        "items": [streak_summary(index, subject_id, today) for subject_id in subject_ids],
        "skipped": skipped_payload(index),
    }
