"""Exception hierarchy for configuration and tooling around the validator.

Range checks never raise; they report ``Status.INVALID`` instead.
"""


class UtilsTimeError(Exception):
    """Base exception for all utils-time errors."""


# --- Configuration ---
class ConfigError(UtilsTimeError):
    """Invalid or unreadable configuration."""
