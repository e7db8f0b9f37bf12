"""Enumerations used across utils-time."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Two-valued outcome of a range check.

    ``INVALID`` dominates when results are combined with ``|``, so an
    aggregate check is invalid as soon as any component is invalid.
    """

    VALID = "valid"
    INVALID = "invalid"

    @property
    def is_valid(self) -> bool:
        return self is Status.VALID

    def __or__(self, other: object) -> Status:
        if not isinstance(other, Status):
            return NotImplemented
        if self is Status.INVALID or other is Status.INVALID:
            return Status.INVALID
        return Status.VALID

    __ror__ = __or__

    @classmethod
    def combine(cls, *statuses: Status) -> Status:
        """Fold any number of results; an empty fold is ``VALID``."""
        result = cls.VALID
        for status in statuses:
            result |= status
        return result


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    CONSOLE = "console"  # Human-readable, for terminals
    JSON = "json"  # One JSON object per line
