"""Range validation for calendar date and time values.

Public API
----------
Models:
    Time, Date, DateTime

Status:
    Status

Validators:
    validate_time, validate_date, validate_datetime
"""

from utils_time.core.enums import Status
from utils_time.core.models import Date, DateTime, Time
from utils_time.validation.validator import (
    validate_date,
    validate_datetime,
    validate_time,
)

__all__ = [
    # Status
    "Status",
    # Models
    "Date",
    "DateTime",
    "Time",
    # Validators
    "validate_date",
    "validate_datetime",
    "validate_time",
]
