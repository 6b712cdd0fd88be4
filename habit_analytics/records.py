from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from habit_analytics.errors import InvalidOutcome


def _normalize_time_value(value):
    if value is None:
        return None
    if hasattr(value, "strftime"):
        return value.strftime("%H:%M")
    value_str = str(value).strip()
    return value_str[:5] if value_str else None


def _normalize_date_value(value):
    if isinstance(value, date):
        return value.isoformat()
    return value


def parse_outcome(value) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        raise InvalidOutcome(value)
    # bools, 0/1 and numpy scalars all compare equal to True or False
    if value is not None and value in (True, False):
        return bool(value)
    raise InvalidOutcome(value)


@dataclass(frozen=True)
class LogRecord:
    """One pass/fail outcome for a subject on a calendar day.

    ``date`` is kept as the ISO ``YYYY-MM-DD`` string the store hands over;
    it is validated when the record is indexed, not here.
    """

    subject_id: str
    date: str
    succeeded: bool
    notes: Optional[str] = None
    actual_time: Optional[str] = None
    target_time: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "LogRecord":
        return cls(
            subject_id=str(row["subject_id"]),
            date=_normalize_date_value(row["date"]),
            succeeded=parse_outcome(row["succeeded"]),
            notes=row.get("notes") or None,
            actual_time=_normalize_time_value(row.get("actual_time")),
            target_time=_normalize_time_value(row.get("target_time")),
        )


@dataclass(frozen=True)
class SkippedRecord:
    subject_id: str
    date: str
    error: Exception
    record: Optional[LogRecord] = None

    @classmethod
    def of(cls, record: LogRecord, error: Exception) -> "SkippedRecord":
        return cls(record.subject_id, str(record.date), error, record)

    @property
    def reason(self) -> str:
        return str(self.error)
