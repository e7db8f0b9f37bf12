"""Shared fixtures for the utils-time test suite."""

from __future__ import annotations

import logging

import pytest

from utils_time.core.models import Date, DateTime, Time
from utils_time.observability.logger import PACKAGE_LOGGER


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Boundary values
# ---------------------------------------------------------------------------

@pytest.fixture
def last_second():
    """Return 23:59:59, the latest legal time."""
    return Time(hour=23, minute=59, second=59)


@pytest.fixture
def last_date():
    """Return 31/12/99, the latest legal date."""
    return Date(day=31, month=12, year=99)


@pytest.fixture
def last_datetime(last_date, last_second):
    return DateTime(date=last_date, time=last_second)
