"""Logging utilities for guideview.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the entry point calls `setup_logging()` once. Output goes to a rotating
file rather than the console so that log lines never interfere with the TUI.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import (
    GUIDEVIEW_CONFIG_DIR,
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    MAX_LOG_BYTES,
)

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Configure the ``guideview`` logger hierarchy.

    The root logger is left alone so third-party libraries (httpx, textual)
    stay quiet; only ``guideview.*`` loggers write to the file.

    Returns:
        Path of the log file.
    """
    log_dir = log_dir or GUIDEVIEW_CONFIG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    logger = logging.getLogger("guideview")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace a handler from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        if getattr(handler, "_guideview_handler", False):
            logger.removeHandler(handler)
            handler.close()

    handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    handler._guideview_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False

    return log_file

