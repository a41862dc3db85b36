"""Configuration utilities for guideview.

Settings come from the ``GUIDEVIEW_*`` environment variables declared in
`ENV_VAR_DEFINITIONS`. Getters validate on read and raise
`ConfigurationError` for a bad value rather than silently using a default.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import ConfigurationError
from .constants import (
    CODE_THEMES,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_ORIGIN,
    ENV_VAR_DEFINITIONS,
    LIGHT_TERMINAL_BACKGROUND,
)


@dataclass(frozen=True)
class SettingInfo:
    """One environment setting as shown by ``guideview config``."""

    name: str
    description: str
    value: Optional[str]
    default: Optional[str]
    error: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return self.value is not None


def check_setting(name: str, value: Optional[str]) -> Optional[str]:
    """Return why ``value`` is not acceptable for setting ``name``, or None."""
    if value is None or name not in ENV_VAR_DEFINITIONS:
        return None

    if name == "GUIDEVIEW_FETCH_TIMEOUT":
        try:
            seconds = float(value)
        except ValueError:
            return f"Invalid value '{value}' for {name}. Expected a number of seconds"
        if seconds <= 0:
            return f"Invalid value '{value}' for {name}. Timeout must be positive"
        return None

    if name == "GUIDEVIEW_ORIGIN" and not value.startswith(("http://", "https://")):
        return f"Invalid value '{value}' for {name}. Expected an http(s) URL"

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values and value.upper() not in valid_values:
        return f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return None


def _setting(name: str) -> Optional[str]:
    value = os.environ.get(name)
    error = check_setting(name, value)
    if error:
        raise ConfigurationError(error, setting=name)
    return value


def invalid_settings() -> List[str]:
    """Error messages for every invalid setting (empty if all are valid)."""
    errors = (check_setting(name, os.environ.get(name)) for name in ENV_VAR_DEFINITIONS)
    return [error for error in errors if error]


def describe_settings() -> List[SettingInfo]:
    return [
        SettingInfo(
            name=name,
            description=definition["description"],
            value=os.environ.get(name),
            default=definition["default"],
            error=check_setting(name, os.environ.get(name)),
        )
        for name, definition in ENV_VAR_DEFINITIONS.items()
    ]


def get_origin() -> str:
    """Origin that serves the guides, without a trailing slash."""
    return (_setting("GUIDEVIEW_ORIGIN") or DEFAULT_ORIGIN).rstrip("/")


def get_fetch_timeout() -> float:
    """Fetch timeout in seconds."""
    value = _setting("GUIDEVIEW_FETCH_TIMEOUT")
    return float(value) if value else DEFAULT_FETCH_TIMEOUT_SECONDS


def get_log_level() -> str:
    return (_setting("GUIDEVIEW_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def get_code_theme() -> str:
    """Get the code theme, honoring GUIDEVIEW_CODE_THEME then the terminal background."""
    theme = os.environ.get("GUIDEVIEW_CODE_THEME")
    if theme:
        return theme

    # COLORFGBG is "<fg>;<bg>"; 15 is white in most terminals
    terminal_bg = os.environ.get("COLORFGBG", "").split(";")[-1]
    if terminal_bg == LIGHT_TERMINAL_BACKGROUND:
        return CODE_THEMES["light"]["default"]
    return CODE_THEMES["dark"]["default"]
