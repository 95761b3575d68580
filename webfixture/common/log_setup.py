"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the fixture framework.

Call `init_logger()` once at the start of a test session (the root
conftest does this) to get consistent console and optional file output.

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized: bool = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None,
    config: Optional[ConfigLoader] = None,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Explicit arguments win over settings from `config`; settings win over
    the built-in defaults.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format_string: Log format string.
        log_file: Optional file path to write logs to.
        config: Settings loader to read `logging.*` keys from.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/fixture.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    def setting(key: str, default):
        return config.get(key, default) if config is not None else default

    level = (level or setting("logging.level", "INFO")).upper()
    format_string = format_string or setting("logging.format", DEFAULT_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or setting("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=setting("logging.rotation", "10 MB"),
            retention=setting("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """Allow `init_logger` to run again (used by tests)."""
    global _logger_initialized
    _logger_initialized = False
