"""
Logging configuration for navstack.

This module sets up the loguru sinks from the [logging] section of the
configuration. Library code only ever calls `logger`; sinks are the
application's business, so `configure_logging()` is called once at startup
(the demo app does this in `main()`).
"""

import os
import sys
from typing import Optional

from loguru import logger

from ..config import get_bool_setting, get_setting


VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Optional[str] = None) -> str:
    """
    Resolve the log level to use.

    Order: explicit argument, $NAVSTACK_LOG_LEVEL, [logging] level, INFO.
    Unknown names fall back to INFO.
    """
    candidate = level or os.environ.get("NAVSTACK_LOG_LEVEL") or get_setting("logging", "level", "INFO")
    candidate = str(candidate).upper()
    if candidate not in VALID_LEVELS:
        logger.warning(f"Unknown log level '{candidate}', using INFO")
        return "INFO"
    return candidate


def configure_logging(level: Optional[str] = None, console: Optional[bool] = None) -> str:
    """
    Configure loguru sinks.

    This should be called once at startup.

    Args:
        level: Overrides the configured level
        console: Overrides [logging] console

    Returns:
        The level the sinks were configured with
    """
    resolved = resolve_level(level)
    logger.remove()  # Remove default handler

    if console is None:
        console = get_bool_setting("logging", "console", True)
    if console:
        logger.add(
            sink=sys.stderr,
            level=resolved,
            colorize=True,
        )

    log_file = get_setting("logging", "log_file", "")
    if log_file:
        logger.add(
            sink=os.path.expanduser(str(log_file)),
            level=resolved,
            rotation=get_setting("logging", "rotation", "10 MB"),
            retention=get_setting("logging", "retention", "7 days"),
        )

    logger.info(f"navstack logging configured: level={resolved}, file={log_file or None}")
    return resolved
