"""Exception hierarchy for intervals_general.

The interval algebra itself never raises for well-formed input; these
exceptions cover the plumbing around it (configuration loading and the
serialization codec).
"""

from __future__ import annotations


class IntervalError(Exception):
    """Base exception for all intervals_general errors."""


class ConfigurationError(IntervalError):
    """Raised when a configuration file cannot be read or is invalid."""


class SerializationError(IntervalError):
    """Raised when an interval cannot be encoded or written."""


class DeserializationError(IntervalError):
    """Raised when a payload cannot be decoded into an interval.

    Parameters
    ----------
    message : str
        Error message.
    line : int | None
        1-based line number for JSON Lines input, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (at line {line})"
        super().__init__(message)
