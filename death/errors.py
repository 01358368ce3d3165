"""Exceptions raised by the death package.

Everything derives from `DeathError` so the CLI can catch one type and turn it
into a message plus a non-zero exit code.
"""

from typing import Optional


class DeathError(Exception):
    """Base class for all package errors."""


class InvalidDateError(DeathError, ValueError):
    """Malformed or out-of-range date.

    `kind` says what went wrong: separator, parts, number, year, month, day.
    """

    def __init__(self, message: str, kind: Optional[str] = None):
        super().__init__(message)
        self.kind = kind


class EmptyReasonListError(DeathError, ValueError):
    """A reason was requested from an empty list."""


class ReasonsFileError(DeathError, OSError):
    """A reasons file was required but could not be read."""
