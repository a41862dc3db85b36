"""
Centralized constants for guideview.

Every value that shapes fetching, rendering or logging lives here so the
rest of the code reads its behavior from one place.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

GUIDEVIEW_CONFIG_DIR = Path.home() / ".config" / "guideview"
LOG_FILE_NAME = "guideview.log"

# =============================================================================
# FETCHING
# =============================================================================

DEFAULT_ORIGIN = "http://localhost:5173"
GUIDE_PATH_TEMPLATE = "/guides/{identifier}.mdx"
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0

# Text shown to the user whenever a guide cannot be fetched
FETCH_ERROR_MESSAGE = "Failed to load guide"

# =============================================================================
# CODE HIGHLIGHTING
# =============================================================================

# Themes that work well for different terminal backgrounds
CODE_THEMES = {
    "dark": {
        "default": "monokai",
        "alternatives": ["dracula", "nord", "one-dark", "gruvbox-dark"],
    },
    "light": {"default": "manni", "alternatives": ["tango", "perldoc", "friendly", "colorful"]},
}

# COLORFGBG background value reported by light terminals
LIGHT_TERMINAL_BACKGROUND = "15"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "INFO"
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 2

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "GUIDEVIEW_ORIGIN": {
        "description": "Origin serving /guides/<name>.mdx",
        "default": DEFAULT_ORIGIN,
        "valid_values": None,
    },
    "GUIDEVIEW_FETCH_TIMEOUT": {
        "description": "Seconds to wait for a guide before giving up",
        "default": str(DEFAULT_FETCH_TIMEOUT_SECONDS),
        "valid_values": None,
    },
    "GUIDEVIEW_CODE_THEME": {
        "description": "Pygments theme for code blocks (auto-detected when unset)",
        "default": None,
        "valid_values": None,
    },
    "GUIDEVIEW_LOG_LEVEL": {
        "description": "Log level for ~/.config/guideview/guideview.log",
        "default": DEFAULT_LOG_LEVEL,
        "valid_values": LOG_LEVELS,
    },
}
