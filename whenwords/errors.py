"""Exception hierarchy for duration formatting and parsing.

All failures are local input validation errors. Each kind is its own class
so callers can tell them apart; none subclasses another.
"""

from typing import Any


class WhenwordsError(ValueError):
    """Base exception for whenwords input errors."""

    message: str = "invalid input"

    def __init__(self, value: Any = None, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.value: Any = value


class NegativeDurationError(WhenwordsError):
    """Raised when formatting a negative number of seconds."""

    message = "duration cannot be negative"


class EmptyInputError(WhenwordsError):
    """Raised when parsing blank or whitespace-only text."""

    message = "input cannot be empty"


class NegativeValueError(WhenwordsError):
    """Raised when parsing text with a leading minus sign."""

    message = "negative values are not allowed"


class UnparseableError(WhenwordsError):
    """Raised when text matches neither colon nor unit-suffix notation."""

    message = "unable to parse duration"
