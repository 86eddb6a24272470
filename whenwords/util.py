"""Utility constants and helpers for whenwords.

Time unit constants represent durations in seconds.
MONTH and YEAR are the fixed calendar-free lengths used when decomposing
durations (30 and 365 days), not averages.
"""

from typing import NamedTuple

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000


class Unit(NamedTuple):
    seconds: int
    suffix: str
    name: str


# Largest first; format_duration relies on this order
UNITS: tuple[Unit, ...] = (
    Unit(YEAR, "y", "year"),
    Unit(MONTH, "mo", "month"),
    Unit(DAY, "d", "day"),
    Unit(HOUR, "h", "hour"),
    Unit(MINUTE, "m", "minute"),
    Unit(SECOND, "s", "second"),
)


def format_count(n: int) -> str:
    """Render an integer count in plain decimal, no grouping."""
    return str(int(n))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3)."""
    if x < 0:
        return -int(-x + 0.5)
    return int(x + 0.5)


def pluralize(count: int, word: str) -> str:
    return word if count == 1 else word + "s"
