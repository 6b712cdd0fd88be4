from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from habit_analytics.dates import parse_iso_date
from habit_analytics.errors import DuplicateRecord, InvalidDateFormat
from habit_analytics.records import LogRecord, SkippedRecord

logger = logging.getLogger(__name__)

DUPLICATE_POLICIES = ("reject", "last")


class LogIndex:
    """Read-only lookup of log records keyed by subject and day.

    Build it once per data snapshot with :meth:`build`; every calculator in
    this package only reads from it.
    """

    def __init__(self, by_subject: dict[str, dict[date, LogRecord]], skipped: Iterable[SkippedRecord] = ()):
        self._by_subject = by_subject
        self._sorted_dates = {
            subject_id: tuple(sorted(days)) for subject_id, days in by_subject.items()
        }
        self.skipped = tuple(skipped)

    @classmethod
    def build(cls, records: Iterable[LogRecord], on_duplicate: str = "reject") -> "LogIndex":
        if on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy: {on_duplicate!r}")
        by_subject: dict[str, dict[date, LogRecord]] = {}
        skipped: list[SkippedRecord] = []
        for record in records:
            try:
                day = parse_iso_date(record.date)
            except InvalidDateFormat as exc:
                logger.warning("Skipping record for %s: %s", record.subject_id, exc)
                skipped.append(SkippedRecord.of(record, exc))
                continue
            days = by_subject.setdefault(record.subject_id, {})
            if day in days:
                if on_duplicate == "reject":
                    raise DuplicateRecord(record.subject_id, day.isoformat())
                logger.warning(
                    "Duplicate record for %s on %s, keeping the later one",
                    record.subject_id,
                    day.isoformat(),
                )
            days[day] = record
        return cls(by_subject, skipped)

    def get(self, subject_id: str, day) -> Optional[LogRecord]:
        days = self._by_subject.get(subject_id)
        if not days:
            return None
        if isinstance(day, str):
            day = parse_iso_date(day)
        return days.get(day)

    def succeeded_on(self, subject_id: str, day: date) -> bool:
        record = self.get(subject_id, day)
        return record is not None and record.succeeded

    def dates_for_subject(self, subject_id: str) -> tuple[date, ...]:
        return self._sorted_dates.get(subject_id, ())

    def records_for_subject(self, subject_id: str) -> list[LogRecord]:
        days = self._by_subject.get(subject_id, {})
        return [days[day] for day in self.dates_for_subject(subject_id)]

    def subjects(self) -> list[str]:
        return sorted(self._by_subject)

    def __len__(self):
        return sum(len(days) for days in self._by_subject.values())

    def __contains__(self, key):
        subject_id, day = key
        return self.get(subject_id, day) is not None
