"""Duration formatting and parsing.

format_duration renders a second count as "2 hours, 30 minutes" or "2h 30m";
parse_duration reads free text such as "1h30m", "2 days 4 hours" or
"2:30:00" back into seconds.
"""

import logging
import re

from whenwords.errors import (
    EmptyInputError,
    NegativeDurationError,
    NegativeValueError,
    UnparseableError,
)
from whenwords.options import DEFAULT_OPTIONS, DurationOptions
from whenwords.util import (
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    UNITS,
    WEEK,
    Unit,
    format_count,
    pluralize,
)

logger = logging.getLogger(__name__)

# hours:minutes[:seconds], minutes and seconds exactly two digits
_COLON_RE = re.compile(r"^(\d+):(\d{2})(?::(\d{2}))?$")

# <number><optional space><unit word>; a number never starts mid-number
_TERM_RE = re.compile(r"(?<![\d.:])(\d+(?:\.\d+)?|\.\d+)\s*([a-z]+)", re.IGNORECASE)

_ALIASES: dict[str, int] = {
    **dict.fromkeys(("w", "week", "weeks"), WEEK),
    **dict.fromkeys(("d", "day", "days"), DAY),
    **dict.fromkeys(("h", "hr", "hrs", "hour", "hours"), HOUR),
    **dict.fromkeys(("m", "min", "mins", "minute", "minutes"), MINUTE),
    **dict.fromkeys(("s", "sec", "secs", "second", "seconds"), SECOND),
}


def _decompose(seconds: int) -> list[tuple[int, Unit]]:
    parts: list[tuple[int, Unit]] = []
    remaining = seconds
    for unit in UNITS:
        count, remaining = divmod(remaining, unit.seconds)
        if count:
            parts.append((count, unit))
    return parts


def format_duration(
    seconds: int | float,
    options: DurationOptions | None = None,
    *,
    compact: bool | None = None,
    max_units: int | None = None,
) -> str:
    """
    Render a non-negative number of seconds as readable text.

    Args:
        seconds: Duration in seconds; fractions of a second are dropped
        options: Rendering options (defaults to verbose, two units)
        compact: Override ``options.compact``
        max_units: Override ``options.max_units``

    Returns:
        "2 hours, 30 minutes" (verbose) or "2h 30m" (compact);
        "0 seconds" / "0s" for zero

    Raises:
        NegativeDurationError: If seconds is negative

    Example:
        >>> format_duration(9000)
        '2 hours, 30 minutes'
        >>> format_duration(9000, compact=True)
        '2h 30m'
        >>> format_duration(93784, max_units=3)
        '1 day, 2 hours, 3 minutes'
    """
    if seconds < 0:
        raise NegativeDurationError(seconds)

    opts = options or DEFAULT_OPTIONS
    if compact is not None:
        opts = opts.with_compact(compact)
    if max_units is not None:
        opts = opts.with_max_units(max_units)

    parts = _decompose(int(seconds))
    if not parts:
        return "0s" if opts.compact else "0 seconds"

    parts = parts[: opts.unit_limit]
    if opts.compact:
        return " ".join(f"{format_count(n)}{unit.suffix}" for n, unit in parts)
    return ", ".join(
        f"{format_count(n)} {pluralize(n, unit.name)}" for n, unit in parts
    )


def parse_duration(text: str) -> int:
    """
    Parse human-written duration text into whole seconds.

    Two notations are understood, tried in this order:

    - Colon notation ``H:MM`` or ``H:MM:SS`` (e.g. "2:30:00"), which must
      make up the whole string
    - Unit terms ``<number><unit>`` repeated any number of times
      (e.g. "1h30m", "1.5 hours", "2 days, 4 hrs"); units are weeks, days,
      hours, minutes and seconds, case-insensitive. Unknown unit words are
      ignored as long as at least one term is recognized. Text containing
      ":" is only ever read as colon notation.

    Args:
        text: The text to parse

    Returns:
        Total duration in seconds

    Raises:
        EmptyInputError: If text is blank
        NegativeValueError: If text starts with "-"
        UnparseableError: If no notation matches
    """
    stripped = text.strip()
    if not stripped:
        raise EmptyInputError(text)
    if stripped.startswith("-"):
        raise NegativeValueError(text)

    match = _COLON_RE.match(stripped)
    if match:
        hours, minutes, secs = match.groups()
        logger.debug("Parsed %r as colon notation", stripped)
        return int(hours) * HOUR + int(minutes) * MINUTE + int(secs or 0)
    if ":" in stripped:
        # Colon notation never mixes with unit terms
        raise UnparseableError(text)

    total = 0
    terms = 0
    for number, word in _TERM_RE.findall(stripped):
        multiplier = _ALIASES.get(word.lower())
        if multiplier is None:
            logger.debug("Skipping unknown duration unit %r in %r", word, stripped)
            continue
        total += int(float(number) * multiplier)
        terms += 1

    if not terms:
        raise UnparseableError(text)
    return total
