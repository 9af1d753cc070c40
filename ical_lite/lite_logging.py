"""
Central logging configuration for ical_lite.

The parser modules only create module loggers; applications call
``configure_lite_logging`` once to choose levels and install a console handler.
"""

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

LOG_FORMAT = "[%(asctime)s] %(log_color)s%(levelname)s%(reset)s - %(name)s - %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

LITE_MODULES = ["ical_lite"]

# Third-party loggers that are noisy at DEBUG
SUPPRESSED_LOGGERS = ["asyncio"]


def _env_debug() -> bool:
    return os.getenv("ICAL_LITE_DEBUG", "").lower() in ("1", "true", "yes")


def configure_lite_logging(debug_mode: bool = False, force_debug: Optional[bool] = None) -> None:
    """
    Configure logging levels for ical_lite.

    Args:
        debug_mode: Whether to enable debug logging for ical_lite modules
        force_debug: Override debug mode setting (None to use env var detection)

    Environment Variables:
        ICAL_LITE_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        ICAL_LITE_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_log_level = os.getenv("ICAL_LITE_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif _env_debug():
        final_debug = True
    else:
        final_debug = debug_mode

    root_level = logging.DEBUG if final_debug else logging.INFO
    if env_log_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Only add a handler if none exist, so host applications keep their setup
    if not root_logger.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setLevel(root_level)
        handler.setFormatter(ColoredFormatter(LOG_FORMAT, log_colors=LOG_COLORS))
        root_logger.addHandler(handler)

    logger_config: dict[str, int] = {name: logging.WARNING for name in SUPPRESSED_LOGGERS}

    lite_level = logging.DEBUG if final_debug else logging.INFO
    for module in LITE_MODULES:
        logger_config[module] = lite_level

    for logger_name, level in logger_config.items():
        logging.getLogger(logger_name).setLevel(level)

    if final_debug:
        root_logger.debug("Debug logging enabled for ical_lite modules")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}
    for logger_name in ["ical_lite", *SUPPRESSED_LOGGERS]:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)
    return status
