from __future__ import annotations


class AnalyticsError(ValueError):
    pass


class InvalidTimeFormat(AnalyticsError):
    def __init__(self, value):
        super().__init__(f"Invalid time format: {value!r} (expected HH:MM)")
        self.value = value


class InvalidDateFormat(AnalyticsError):
    def __init__(self, value):
        super().__init__(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")
        self.value = value


class InvalidDateRange(AnalyticsError):
    def __init__(self, start, end):
        super().__init__(f"Invalid date range: {start} is after {end}")
        self.start = start
        self.end = end


class DuplicateRecord(AnalyticsError):
    def __init__(self, subject_id: str, day: str):
        super().__init__(f"Duplicate record for subject {subject_id!r} on {day}")
        self.subject_id = subject_id
        self.date = day


class InvalidOutcome(AnalyticsError):
    def __init__(self, value):
        super().__init__(f"Invalid outcome: {value!r} (expected true/false or 0/1)")
        self.value = value
