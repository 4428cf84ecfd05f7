"""
================================================================================
Global Logging Configuration
================================================================================

Centralized Loguru setup shared by the framework, the pytest plugins and the
test runner.

Features:
    - Idempotent initialization
    - Level and optional log file taken from FrameworkConfig
    - File sink rotation and retention

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from basesetup.config import FrameworkConfig

DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    config: Optional[FrameworkConfig] = None,
    level: str = None,
    format_str: str = None,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Call once at process start (the pytest plugin does this after the
    configuration is loaded). Subsequent calls are no-ops.

    Args:
        config: Loaded configuration; supplies log level and log file.
        level: Explicit level, overrides the configured one.
        format_str: Custom log format string.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or (config.log_level if config else "INFO")).upper()
    log_format = format_str or DEFAULT_FORMAT

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = config.log_file if config else None
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow init_logger() to configure sinks again."""
    global _logger_initialized
    _logger_initialized = False


def get_logger():
    """
    Returns the configured Loguru logger instance.

    Ensures the logger is initialized before returning.
    """
    if not _logger_initialized:
        init_logger()
    return logger


__all__ = [
    "init_logger",
    "reset_logger",
    "get_logger",
]
