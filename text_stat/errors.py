"""Exception hierarchy for text statistics."""

from __future__ import annotations


class TextStatError(Exception):
    """Base class for text-statistics errors."""


class InvalidPatternError(TextStatError, ValueError):
    """Raised when a caller-supplied regular expression does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class NoTextSetError(TextStatError, RuntimeError):
    """Raised when a metric is requested before any text has been set."""


class EmptyValuesError(TextStatError, ValueError):
    """Raised when a minimum or maximum is requested over no values."""


__all__ = [
    "EmptyValuesError",
    "InvalidPatternError",
    "NoTextSetError",
    "TextStatError",
]
