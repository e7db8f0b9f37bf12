"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .enums import LogFormat, LogLevel
from .errors import ConfigError


class ObservabilityConfig(BaseModel):
    log_level: LogLevel = LogLevel.WARNING
    log_format: LogFormat = LogFormat.CONSOLE


class Settings(BaseSettings):
    """Top-level settings.

    Loaded from a TOML config file, overridden by environment variables
    such as ``UTILS_TIME_OBSERVABILITY__LOG_LEVEL=DEBUG``.
    """

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "UTILS_TIME_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional, ignored if missing).
        overrides: Dict of overrides to apply on top; nested tables are merged.

    Raises:
        ConfigError: If the config file cannot be read or parsed, or the
            resulting settings fail validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except (OSError, UnicodeDecodeError, tomli.TOMLDecodeError) as exc:
                raise ConfigError(f"Cannot parse config file {path}: {exc}") from exc

    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
