"""Time-of-day helpers for wake-up targets.

Times are handled as minutes since midnight (0..1439). ``circular_diff``
compares an actual time with the nearest occurrence of a target so that
targets close to midnight are compared sensibly.
"""

from __future__ import annotations

import re
from datetime import time

from habit_analytics.errors import InvalidTimeFormat

MINUTES_PER_DAY = 24 * 60
HALF_DAY = MINUTES_PER_DAY // 2

# Database time columns come back as HH:MM:SS; seconds are ignored.
_TIME_RE = re.compile(r"^([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?$")


def parse_time(value) -> int:
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        raise InvalidTimeFormat(value)
    match = _TIME_RE.match(value.strip())
    if not match:
        raise InvalidTimeFormat(value)
    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise InvalidTimeFormat(value)
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"minutes out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_minutes(value: int) -> int:
    return value % MINUTES_PER_DAY


def circular_diff(target_minutes: int, actual_minutes: int) -> int:
    """Signed ``actual - target`` wrapped into (-720, 720].

    Positive means late, negative early. Exactly twelve hours apart counts
    as late.
    """
    diff = actual_minutes - target_minutes
    if diff <= -HALF_DAY:
        diff += MINUTES_PER_DAY
    elif diff > HALF_DAY:
        diff -= MINUTES_PER_DAY
    return diff


def time_diff(target: str, actual: str) -> int:
    return circular_diff(parse_time(target), parse_time(actual))
