"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Optional

PACKAGE_LOGGER = "bitmap_transpose"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.StreamHandler] = None


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


LOG_LEVELS = {
    LogLevel.DEBUG.value: logging.DEBUG,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.WARNING.value: logging.WARNING,
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.CRITICAL.value: logging.CRITICAL,
}


def resolve_log_level(
    log_level: Optional[str] = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Resolve a numeric log level from explicit or modifier flags."""
    if log_level:
        key = log_level.value if isinstance(log_level, LogLevel) else log_level.lower()
        return LOG_LEVELS[key]

    # -v shows INFO, -vv shows DEBUG.
    offset = verbose - quiet
    if offset >= 2:
        return logging.DEBUG
    if offset == 1:
        return logging.INFO
    if offset == 0:
        return logging.WARNING
    return logging.ERROR


def configure_logging(
    log_level: Optional[str] = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Send package logs to stderr at the resolved level and return it.

    Only the ``bitmap_transpose`` logger is touched; the root logger and its
    handlers are left alone.
    """
    global _handler
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        package_logger.addHandler(_handler)
    else:
        _handler.stream = sys.stderr

    _handler.setLevel(level)
    package_logger.setLevel(level)
    return level
