"""Runtime configuration.

Environment Variables:
    TEXTPOS_CHECKED: Default consistency checking for CompositePosition (default: false)
    TEXTPOS_LOG_LEVEL: Logging level used by setup_logging() (default: WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class Config:
    checked: bool  # Default for CompositePosition.checked
    log_level: str  # DEBUG, INFO, WARNING, ERROR, CRITICAL


_config: Config | None = None


def _parse_bool(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got: {raw}")


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Raises:
        ValueError: If a variable holds an invalid value
    """
    checked = _parse_bool("TEXTPOS_CHECKED", "false")

    log_level = os.getenv("TEXTPOS_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"TEXTPOS_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got: {log_level}"
        )

    return Config(checked=checked, log_level=log_level)


def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
