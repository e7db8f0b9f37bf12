"""Shallow range validation of date and time values.

Only upper bounds are checked; fields are unsigned so there is no lower
bound to test. Day 0 and month 0 pass, and day 31 passes for every
month: there is no month-length or leap-year awareness. Callers that
need a strict calendar check must layer it on top.
"""

from __future__ import annotations

import logging

from utils_time.core.enums import Status
from utils_time.core.models import Date, DateTime, Time

logger = logging.getLogger(__name__)

MAX_HOUR = 23
MAX_MINUTE = 59
MAX_SECOND = 59

MAX_DAY = 31
MAX_MONTH = 12
MAX_YEAR = 99  # Two-digit offset from the application epoch


def validate_time(time: Time) -> Status:
    """Check hour <= 23, minute <= 59 and second <= 59."""
    if time.hour > MAX_HOUR or time.minute > MAX_MINUTE or time.second > MAX_SECOND:
        logger.debug(
            "Time out of range: %02d:%02d:%02d", time.hour, time.minute, time.second
        )
        return Status.INVALID
    return Status.VALID


def validate_date(date: Date) -> Status:
    """Check day <= 31, month <= 12 and year <= 99."""
    if date.day > MAX_DAY or date.month > MAX_MONTH or date.year > MAX_YEAR:
        logger.debug(
            "Date out of range: day=%d month=%d year=%d",
            date.day,
            date.month,
            date.year,
        )
        return Status.INVALID
    return Status.VALID


def validate_datetime(datetime: DateTime) -> Status:
    """Invalid if either the date or the time component is invalid."""
    status = Status.VALID
    status |= validate_time(datetime.time)
    status |= validate_date(datetime.date)
    return status
