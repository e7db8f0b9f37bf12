"""Range checks for Time, Date and DateTime values."""

from utils_time.validation.validator import (
    MAX_DAY,
    MAX_HOUR,
    MAX_MINUTE,
    MAX_MONTH,
    MAX_SECOND,
    MAX_YEAR,
    validate_date,
    validate_datetime,
    validate_time,
)

__all__ = [
    # Limits
    "MAX_DAY",
    "MAX_HOUR",
    "MAX_MINUTE",
    "MAX_MONTH",
    "MAX_SECOND",
    "MAX_YEAR",
    # Validators
    "validate_date",
    "validate_datetime",
    "validate_time",
]
