"""Tests for the Time, Date and DateTime value types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from utils_time.core.models import Date, DateTime, Time


class TestTime:
    def test_construction(self):
        t = Time(hour=12, minute=30, second=15)
        assert (t.hour, t.minute, t.second) == (12, 30, 15)

    def test_out_of_range_is_constructible(self):
        # Range is the validator's concern, not the model's
        t = Time(hour=99, minute=99, second=99)
        assert t.hour == 99

    @pytest.mark.parametrize("field", ["hour", "minute", "second"])
    def test_negative_rejected(self, field):
        values = {"hour": 0, "minute": 0, "second": 0, field: -1}
        with pytest.raises(ValidationError):
            Time(**values)

    @pytest.mark.parametrize("value", [True, "5", 5.0])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError):
            Time(hour=value, minute=0, second=0)

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Time(hour=1, minute=2)

    def test_frozen(self, last_second):
        with pytest.raises(ValidationError):
            last_second.hour = 0


class TestDate:
    def test_construction(self):
        d = Date(day=14, month=2, year=26)
        assert (d.day, d.month, d.year) == (14, 2, 26)

    def test_zero_day_and_month_allowed(self):
        d = Date(day=0, month=0, year=0)
        assert d.day == 0 and d.month == 0

    @pytest.mark.parametrize("field", ["day", "month", "year"])
    def test_negative_rejected(self, field):
        values = {"day": 1, "month": 1, "year": 0, field: -5}
        with pytest.raises(ValidationError):
            Date(**values)

    @pytest.mark.parametrize("value", [False, "12", 12.0])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError):
            Date(day=1, month=value, year=0)


class TestDateTime:
    def test_aggregates_components(self, last_date, last_second):
        dt = DateTime(date=last_date, time=last_second)
        assert dt.date == last_date
        assert dt.time == last_second

    def test_accepts_nested_dicts(self):
        dt = DateTime(
            date={"day": 1, "month": 1, "year": 0},
            time={"hour": 0, "minute": 0, "second": 0},
        )
        assert dt.date == Date(day=1, month=1, year=0)

    def test_equality_is_by_value(self):
        a = DateTime(date=Date(day=1, month=2, year=3), time=Time(hour=4, minute=5, second=6))
        b = DateTime(date=Date(day=1, month=2, year=3), time=Time(hour=4, minute=5, second=6))
        assert a == b
