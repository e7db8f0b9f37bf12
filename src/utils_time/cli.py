"""CLI entry point for utils-time."""

from __future__ import annotations

import click

from .core.config import load_settings
from .core.enums import LogFormat, LogLevel, Status
from .core.errors import ConfigError
from .core.models import Date, DateTime, Time
from .observability.logger import get_logger, setup_logging
from .validation.validator import validate_date, validate_datetime, validate_time

logger = get_logger(__name__)

_UINT = click.IntRange(min=0)


@click.group()
@click.option("--config", default=None, help="Config file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice([lvl.value for lvl in LogLevel], case_sensitive=False),
    help="Log level override",
)
@click.option(
    "--log-format",
    default=None,
    type=click.Choice([fmt.value for fmt in LogFormat]),
    help="Log output format override",
)
def main(config: str | None, log_level: str | None, log_format: str | None) -> None:
    """Validate date and time values against their legal ranges."""
    overrides: dict = {}
    if log_level:
        overrides.setdefault("observability", {})["log_level"] = log_level.upper()
    if log_format:
        overrides.setdefault("observability", {})["log_format"] = log_format

    try:
        settings = load_settings(config_path=config, overrides=overrides)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    logger.debug(
        "settings_loaded",
        config=config,
        log_level=settings.observability.log_level.value,
        log_format=settings.observability.log_format.value,
    )


def _report(status: Status) -> None:
    click.echo(status.value)
    raise SystemExit(0 if status.is_valid else 1)


@main.command("time")
@click.argument("hour", type=_UINT)
@click.argument("minute", type=_UINT)
@click.argument("second", type=_UINT)
def time_cmd(hour: int, minute: int, second: int) -> None:
    """Validate HOUR MINUTE SECOND."""
    _report(validate_time(Time(hour=hour, minute=minute, second=second)))


@main.command("date")
@click.argument("day", type=_UINT)
@click.argument("month", type=_UINT)
@click.argument("year", type=_UINT)
def date_cmd(day: int, month: int, year: int) -> None:
    """Validate DAY MONTH YEAR (year as a two-digit offset)."""
    _report(validate_date(Date(day=day, month=month, year=year)))


@main.command("datetime")
@click.argument("day", type=_UINT)
@click.argument("month", type=_UINT)
@click.argument("year", type=_UINT)
@click.argument("hour", type=_UINT)
@click.argument("minute", type=_UINT)
@click.argument("second", type=_UINT)
def datetime_cmd(
    day: int, month: int, year: int, hour: int, minute: int, second: int
) -> None:
    """Validate DAY MONTH YEAR HOUR MINUTE SECOND."""
    value = DateTime(
        date=Date(day=day, month=month, year=year),
        time=Time(hour=hour, minute=minute, second=second),
    )
    _report(validate_datetime(value))


if __name__ == "__main__":
    main()
