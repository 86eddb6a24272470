"""Tests for calendar-relative date labels and date ranges."""

from datetime import date, datetime, timezone

import pytest

from whenwords import date_range, human_date


def ts(*args: int) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


# Thursday, Jan 18 2024, mid-afternoon
REF = ts(2024, 1, 18, 15, 30)


def test_defaults_to_today():
    """Test that an instant compared with itself is labeled Today."""
    assert human_date(REF) == "Today"
    midnight = ts(2024, 1, 18)
    assert human_date(midnight, midnight) == "Today"


@pytest.mark.parametrize(
    "when, expected",
    [
        (ts(2024, 1, 18, 0, 0, 0), "Today"),
        (ts(2024, 1, 18, 23, 59, 59), "Today"),
        (ts(2024, 1, 17, 23, 59, 59), "Yesterday"),
        (ts(2024, 1, 19, 0, 0, 1), "Tomorrow"),
        (ts(2024, 1, 16), "Last Tuesday"),
        (ts(2024, 1, 15), "Last Monday"),
        (ts(2024, 1, 12), "Last Friday"),
        (ts(2024, 1, 11), "January 11"),
        (ts(2024, 1, 20), "This Saturday"),
        (ts(2024, 1, 24), "This Wednesday"),
        (ts(2024, 1, 25), "January 25"),
        (ts(2024, 3, 5), "March 5"),
        (ts(2023, 12, 25), "December 25, 2023"),
        (ts(2025, 1, 18), "January 18, 2025"),
    ],
)
def test_human_date(when, expected):
    """Test labels around a Thursday reference date."""
    assert human_date(when, REF) == expected


def test_time_of_day_is_ignored():
    """Test that only calendar days matter, not elapsed hours."""
    # 25 hours apart but only one calendar day
    late = ts(2024, 1, 18, 23, 0)
    early = ts(2024, 1, 17, 22, 0)
    assert human_date(early, late) == "Yesterday"
    # 2 minutes apart but across midnight
    assert human_date(ts(2024, 1, 17, 23, 59), ts(2024, 1, 18, 0, 1)) == "Yesterday"


def test_before_epoch():
    """Test that negative timestamps resolve to pre-1970 dates."""
    assert human_date(ts(1969, 7, 20), 0) == "July 20, 1969"


def test_accepts_dates_and_strings():
    """Test that date objects and ISO strings work as instants."""
    assert human_date(date(2024, 1, 17), "2024-01-18T09:00:00Z") == "Yesterday"
    assert human_date("2024-01-20", REF) == "This Saturday"


def test_range_same_day():
    """Test that a range within one day collapses to a single date."""
    assert date_range(ts(2024, 1, 1), ts(2024, 1, 1)) == "January 1, 2024"
    assert date_range(ts(2024, 1, 1, 8), ts(2024, 1, 1, 17)) == "January 1, 2024"


def test_range_same_month():
    """Test that a range within one month shares the month and year."""
    assert date_range(ts(2024, 1, 1), ts(2024, 1, 5)) == "January 1–5, 2024"


def test_range_same_year():
    """Test that a range within one year shares only the year."""
    assert date_range(ts(2024, 1, 28), ts(2024, 2, 3)) == "January 28 – February 3, 2024"


def test_range_across_years():
    """Test that a range across years spells out both dates."""
    assert (
        date_range(ts(2024, 12, 28), ts(2025, 1, 3))
        == "December 28, 2024 – January 3, 2025"
    )


def test_range_swaps_reversed_ends():
    """Test that reversed ends are reported earliest first."""
    assert date_range(ts(2024, 1, 5), ts(2024, 1, 1)) == "January 1–5, 2024"
    assert date_range(ts(2025, 1, 3), ts(2024, 12, 28)) == (
        "December 28, 2024 – January 3, 2025"
    )
