"""Coercion of instant-like values to integer Unix seconds.

Every public function takes instants as ``int`` seconds since the epoch,
but also accepts the other common spellings of a point in time.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from dateutil.parser import isoparse

# Anchor for UTC calendar arithmetic; timedelta math works for negative
# instants where datetime.fromtimestamp may not.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_timestamp(value: Any) -> int:
    """Convert an instant to integer seconds (Unix timestamp).

    Accepts:
    - int: Passed through as-is
    - float: Truncated toward zero to whole seconds
    - datetime: Must be timezone-aware, converted to timestamp
    - date: Midnight UTC of that day
    - str: ISO-8601 text; without an offset it is read as UTC

    Raises:
        TypeError: If value is an unsupported type or naive datetime
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, bool):
        raise TypeError(f"Instant must not be a bool, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return int(value.timestamp())
    if isinstance(value, date):
        return int(datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp())
    if isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except ValueError as e:
            raise ValueError(f"Invalid ISO-8601 instant: {value!r}") from e
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return int(parsed.timestamp())
    raise TypeError(
        f"Instant must be int, float, datetime, date, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def utc_datetime(timestamp: int) -> datetime:
    """Return the UTC datetime for a timestamp (negative values allowed)."""
    return EPOCH + timedelta(seconds=timestamp)


def utc_date(timestamp: int) -> date:
    """Return the UTC calendar date a timestamp falls on."""
    return utc_datetime(timestamp).date()
