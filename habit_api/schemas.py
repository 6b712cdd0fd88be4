from __future__ import annotations

from datetime import date as dt_date
from typing import Optional, List

from pydantic import BaseModel, Field

from habit_analytics.records import LogRecord


class LogRecordIn(BaseModel):
    subject_id: str
    date: str
    succeeded: bool
    notes: Optional[str] = None
    actual_time: Optional[str] = None
    target_time: Optional[str] = None

    def to_record(self) -> LogRecord:
        return LogRecord.from_mapping(self.model_dump())


class SnapshotRequest(BaseModel):
    records: List[LogRecordIn] = Field(default_factory=list)
    today: Optional[dt_date] = None


class StreaksRequest(SnapshotRequest):
    subject_ids: List[str] = Field(default_factory=list)


class MonthlyStatsRequest(SnapshotRequest):
    subject_id: str
    month: Optional[str] = Field(None, pattern=r"^[0-9]{4}-[0-9]{2}$")


class WeeklyStatsRequest(SnapshotRequest):
    subject_ids: List[str]
    week_start: Optional[dt_date] = None


class FallsRequest(SnapshotRequest):
    subject_id: str
    limit: Optional[int] = Field(None, ge=1)


class WakeAnalyticsRequest(SnapshotRequest):
    subject_id: str
    days: int = Field(30, ge=1, le=366)


class TimeDiffRequest(BaseModel):
    target_time: str
    actual_time: str


class SkippedRecordOut(BaseModel):
    subject_id: str
    date: str
    error: str


class StreakOut(BaseModel):
    subject_id: str
    current: int
    longest: int


class StreaksResponse(BaseModel):
    today: str
    items: List[StreakOut]
    skipped: List[SkippedRecordOut]


class PeriodStatsOut(BaseModel):
    success_days: int
    total_days: int
    percentage: int


class MonthlyStatsResponse(BaseModel):
    subject_id: str
    start_date: str
    end_date: str
    stats: PeriodStatsOut
    skipped: List[SkippedRecordOut]


class WeeklyStatsResponse(BaseModel):
    start_date: str
    end_date: str
    percentage: int
    skipped: List[SkippedRecordOut]


class FallOut(BaseModel):
    date: str
    streak_before: int
    recovery_days: Optional[int]
    notes: Optional[str] = None


class FallsSummaryOut(BaseModel):
    total_falls: int
    recovered: int
    unrecovered: int
    average_recovery_days: Optional[float]
    longest_streak_lost: int


class FallsResponse(BaseModel):
    subject_id: str
    items: List[FallOut]
    summary: FallsSummaryOut
    skipped: List[SkippedRecordOut]


class TimeDiffResponse(BaseModel):
    target_minutes: int
    actual_minutes: int
    diff: int


class PunctualityOut(BaseModel):
    average_diff: int
    on_time_percentage: int
    earliest: str
    latest: str
    total_days: int


class WakeDayOut(BaseModel):
    date: str
    actual_minutes: Optional[int]
    target_minutes: int
    diff: Optional[int]
    woke_up: bool


class WeekdayWakeOut(BaseModel):
    weekday: int
    total: int
    success: int
    success_rate: int
    average_diff: int


class WakeTrendOut(BaseModel):
    kind: str
    diff_minutes: int


class WakeAnalyticsResponse(BaseModel):
    subject_id: str
    today: str
    current_streak: int
    longest_streak: int
    monthly: PeriodStatsOut
    punctuality: Optional[PunctualityOut]
    series: List[WakeDayOut]
    weekdays: List[WeekdayWakeOut]
    trend: WakeTrendOut
    skipped: List[SkippedRecordOut]
