from .dates import date_range, human_date
from .duration import format_duration, parse_duration
from .errors import (
    EmptyInputError,
    NegativeDurationError,
    NegativeValueError,
    UnparseableError,
    WhenwordsError,
)
from .instant import to_timestamp
from .options import DEFAULT_OPTIONS, DurationOptions
from .relative import time_ago
from .util import format_count, round_half_up

__all__ = [
    "time_ago",
    "format_duration",
    "parse_duration",
    "human_date",
    "date_range",
    "to_timestamp",
    "DurationOptions",
    "DEFAULT_OPTIONS",
    "WhenwordsError",
    "NegativeDurationError",
    "EmptyInputError",
    "NegativeValueError",
    "UnparseableError",
    "format_count",
    "round_half_up",
]
