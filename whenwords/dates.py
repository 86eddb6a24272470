"""Calendar-relative date labels ("Yesterday", "Last Friday", "March 5").

All comparisons use UTC calendar days; the time of day is discarded.
Names are always English, independent of the process locale.
"""

from datetime import date
from typing import Any

from whenwords.instant import to_timestamp, utc_date

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Used between the two ends of a range
EN_DASH = "–"


def _month_day(d: date) -> str:
    return f"{_MONTHS[d.month - 1]} {d.day}"


def _full_date(d: date) -> str:
    return f"{_month_day(d)}, {d.year}"


def human_date(timestamp: Any, reference: Any = None) -> str:
    """
    Label a date relative to a reference date.

    Args:
        timestamp: The instant to label
        reference: The "today" to compare against; defaults to ``timestamp``

    Returns:
        "Today", "Yesterday", "Tomorrow", "Last {weekday}" (2-6 days back),
        "This {weekday}" (2-6 days ahead), "{Month} {day}" within the
        reference's year, otherwise "{Month} {day}, {year}"

    Example:
        >>> human_date(1705276800, 1705536000)  # Mon Jan 15 vs Thu Jan 18, 2024
        'Last Monday'
    """
    ts = to_timestamp(timestamp)
    ref = ts if reference is None else to_timestamp(reference)

    day = utc_date(ts)
    ref_day = utc_date(ref)
    day_diff = (day - ref_day).days

    if day_diff == 0:
        return "Today"
    if day_diff == -1:
        return "Yesterday"
    if day_diff == 1:
        return "Tomorrow"
    if -6 <= day_diff <= -2:
        return f"Last {_WEEKDAYS[day.weekday()]}"
    if 2 <= day_diff <= 6:
        return f"This {_WEEKDAYS[day.weekday()]}"
    if day.year == ref_day.year:
        return _month_day(day)
    return _full_date(day)


def date_range(start: Any, end: Any) -> str:
    """
    Label the span between two instants, sharing month and year where possible.

    The ends may be given in either order; the earlier one is always shown first.

    Returns:
        "March 5, 2024" for a single day, "March 5–7, 2024" within a month,
        "March 5 – April 7, 2024" within a year, and
        "December 28, 2024 – January 3, 2025" across years
    """
    first = utc_date(to_timestamp(start))
    last = utc_date(to_timestamp(end))
    if last < first:
        first, last = last, first

    if first == last:
        return _full_date(first)
    if first.year != last.year:
        return f"{_full_date(first)} {EN_DASH} {_full_date(last)}"
    if first.month == last.month:
        return f"{_month_day(first)}{EN_DASH}{last.day}, {first.year}"
    return f"{_month_day(first)} {EN_DASH} {_month_day(last)}, {first.year}"
