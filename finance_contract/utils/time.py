"""
Time semantics utilities for contract dates and durations.

This module coerces the various date representations a contract may be
built from into UTC datetimes, and parses the concise duration strings
("5t", "3h", "1d12h") contracts are requested with.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from ..errors import InvalidDurationError

InstantLike = Union[datetime, int, float, str]

SECONDS_PER_DAY = 86400

EPOCH_START = datetime(1970, 1, 1, tzinfo=timezone.utc)

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": SECONDS_PER_DAY,
}

_EPOCH_RE = re.compile(r"-?\d+(\.\d+)?")
_INTERVAL_RE = re.compile(r"(?:\d+[smhd])+")
_INTERVAL_PART_RE = re.compile(r"(\d+)([smhd])")
_TICKS_RE = re.compile(r"(\d+)t", re.IGNORECASE)


def utc_now() -> datetime:
    """
    Get the current wall-clock time.

    Returns:
        Current time as a timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc)


def to_instant(value: InstantLike) -> datetime:
    """
    Coerce a date representation into a UTC datetime.

    Args:
        value: datetime (naive values are taken as UTC), epoch seconds as a
            number or numeric string, or an ISO-8601 string

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ValueError: If a string cannot be interpreted as a date
        TypeError: If the value type is not supported
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, bool):
        raise TypeError(f"Cannot interpret boolean {value!r} as a date")

    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)

    if isinstance(value, str):
        text = value.strip()
        if _EPOCH_RE.fullmatch(text):
            number = float(text) if "." in text else int(text)
            return datetime.fromtimestamp(number, tz=timezone.utc)
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Cannot interpret '{value}' as a date: {e}") from e
        return to_instant(parsed)

    raise TypeError(f"Cannot interpret {type(value).__name__} as a date")


def epoch(instant: datetime) -> int:
    """Whole epoch seconds of an instant."""
    return (instant - EPOCH_START) // timedelta(seconds=1)


def epoch_milliseconds(instant: datetime) -> int:
    """Epoch milliseconds of an instant."""
    return (instant - EPOCH_START) // timedelta(milliseconds=1)


def parse_tick_duration(duration: str) -> Optional[int]:
    """
    Extract the tick count from a tick duration such as "5t".

    Returns:
        Number of ticks, or None if the duration is not tick-based
    """
    match = _TICKS_RE.fullmatch(duration.strip())
    if match is None:
        return None
    return int(match.group(1))


def parse_interval(duration: Union[str, int]) -> timedelta:
    """
    Parse a concise duration string into an interval.

    Accepts one or more <integer><unit> groups with units s, m, h and d
    ("30s", "3h", "1d12h30m"), or a bare integer number of seconds.

    Args:
        duration: Duration string or integer seconds

    Returns:
        Parsed interval

    Raises:
        InvalidDurationError: If the duration is malformed or tick-based
    """
    if isinstance(duration, bool):
        raise InvalidDurationError(f"Invalid duration: {duration!r}", duration=str(duration))

    if isinstance(duration, int):
        if duration < 0:
            raise InvalidDurationError(f"Duration must be non-negative: {duration}",
                                       duration=str(duration))
        return timedelta(seconds=duration)

    if not isinstance(duration, str):
        raise InvalidDurationError(f"Invalid duration: {duration!r}", duration=str(duration))

    text = duration.strip().lower()

    if text.isdigit():
        return timedelta(seconds=int(text))

    if not _INTERVAL_RE.fullmatch(text):
        raise InvalidDurationError(f"Invalid duration: '{duration}'", duration=duration)

    seconds = sum(int(amount) * _UNIT_SECONDS[unit]
                  for amount, unit in _INTERVAL_PART_RE.findall(text))
    return timedelta(seconds=seconds)


def interval_days(interval: timedelta) -> float:
    """Length of an interval in days."""
    return interval.total_seconds() / SECONDS_PER_DAY


def is_after(left: datetime, right: datetime) -> bool:
    """True if left is strictly after right, compared in whole seconds."""
    return epoch(left) > epoch(right)


def is_before(left: datetime, right: datetime) -> bool:
    """True if left is strictly before right, compared in whole seconds."""
    return epoch(left) < epoch(right)
