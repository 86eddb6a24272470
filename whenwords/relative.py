"""Relative-time phrasing ("3 hours ago", "in 2 days")."""

from typing import Any

from whenwords.instant import to_timestamp
from whenwords.util import (
    DAY,
    HOUR,
    MINUTE,
    YEAR,
    format_count,
    pluralize,
    round_half_up,
)

JUST_NOW = "just now"

# Half-open buckets: (exclusive upper bound, unit, divisor).
# A divisor of None means the count is fixed at 1.
_BUCKETS: tuple[tuple[int, str, float | None], ...] = (
    (90, "minute", None),
    (45 * MINUTE, "minute", MINUTE),
    (90 * MINUTE, "hour", None),
    (22 * HOUR, "hour", HOUR),
    (36 * HOUR, "day", None),
    (26 * DAY, "day", DAY),
    (46 * DAY, "month", None),
    (320 * DAY, "month", YEAR / 12),
    (548 * DAY, "year", None),
)


def _bucket(gap: int) -> tuple[int, str]:
    for bound, unit, divisor in _BUCKETS:
        if gap < bound:
            if divisor is None:
                return 1, unit
            return round_half_up(gap / divisor), unit
    return round_half_up(gap / YEAR), "year"


def time_ago(timestamp: Any, reference: Any = None) -> str:
    """
    Describe how far ``timestamp`` lies from ``reference``.

    Args:
        timestamp: The instant being described (Unix seconds, or any value
            accepted by :func:`whenwords.instant.to_timestamp`)
        reference: The "now" to measure against; defaults to ``timestamp``

    Returns:
        "just now" for gaps under 45 seconds in either direction,
        "{n} {unit}(s) ago" for past instants, "in {n} {unit}(s)" for future ones

    Example:
        >>> time_ago(0, 3 * 3600)
        '3 hours ago'
        >>> time_ago(86400 * 2, 0)
        'in 2 days'
    """
    ts = to_timestamp(timestamp)
    ref = ts if reference is None else to_timestamp(reference)

    diff = ref - ts
    future = diff < 0
    gap = -diff if future else diff

    if gap < 45:
        return JUST_NOW

    count, unit = _bucket(gap)
    phrase = f"{format_count(count)} {pluralize(count, unit)}"
    if future:
        return f"in {phrase}"
    return f"{phrase} ago"
