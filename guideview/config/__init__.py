"""Configuration for guideview."""

from .settings import (
    SettingInfo,
    check_setting,
    describe_settings,
    get_code_theme,
    get_fetch_timeout,
    get_log_level,
    get_origin,
    invalid_settings,
)

__all__ = [
    "SettingInfo",
    "check_setting",
    "describe_settings",
    "get_code_theme",
    "get_fetch_timeout",
    "get_log_level",
    "get_origin",
    "invalid_settings",
]
