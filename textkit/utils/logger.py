"""
Logging utilities.

Everything logs under the ``textkit`` logger, which carries only a
``NullHandler``. Handlers and formatting are left to the host application.
"""

import logging
import os
from typing import Optional

PACKAGE_LOGGER_NAME = "textkit"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)


def set_log_level(level: str) -> bool:
    """
    Set the level of the textkit logger.

    The root logger is never touched.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            case-insensitive

    Returns:
        True if the level was applied, False for an unknown name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        _package_logger.debug(f"Ignoring unknown log level {level!r}")
        return False
    _package_logger.setLevel(numeric_level)
    return True


# Unset leaves the logger at NOTSET so it follows the host's configuration
_env_level = os.environ.get("TEXTKIT_LOG_LEVEL")
if _env_level:
    set_log_level(_env_level)
