"""Logging for the utils-time CLI.

structlog events and plain stdlib records (the validator logs through
``logging.getLogger(__name__)``) share one handler on the ``utils_time``
logger, so both are rendered by the same console or JSON renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from utils_time.core.enums import LogFormat, LogLevel

PACKAGE_LOGGER = "utils_time"
_HANDLER_NAME = "utils_time.structlog"

# Applied to structlog events and, as foreign_pre_chain, to stdlib records
_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _renderer(format: LogFormat) -> Any:
    if format == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    level: LogLevel | str = LogLevel.WARNING,
    format: LogFormat | str = LogFormat.CONSOLE,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install the utils-time log handler, replacing any earlier one.

    Only the ``utils_time`` logger is touched; the host's root logger
    configuration is left alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: "json" or "console".
        stream: Output stream, defaults to the current ``sys.stderr``.

    Returns:
        The installed handler.
    """
    level = LogLevel(level.upper())
    format = LogFormat(format)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(format),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(package_logger.handlers):
        if old.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.value))
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
