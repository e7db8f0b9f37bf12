"""Value types handed to the validator.

Fields are unsigned integers. Only the type and sign are enforced here;
whether a value is in range is decided by ``utils_time.validation``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt


class Time(BaseModel):
    """Wall-clock time of day."""

    hour: StrictInt = Field(ge=0)
    minute: StrictInt = Field(ge=0)
    second: StrictInt = Field(ge=0)

    model_config = {"frozen": True}


class Date(BaseModel):
    """Calendar date with a two-digit year offset."""

    day: StrictInt = Field(ge=0)
    month: StrictInt = Field(ge=0)
    year: StrictInt = Field(ge=0)  # Offset from an application-defined epoch

    model_config = {"frozen": True}


class DateTime(BaseModel):
    date: Date
    time: Time

    model_config = {"frozen": True}
