"""
Logging configuration for tweenkit.

The package logs through the standard ``logging`` module with one
module-level logger per file. Nothing here runs on import; applications opt
in with ``setup_logging``.
"""

import functools
import logging
import time
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_PACKAGE_LOGGER = "tweenkit"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name == _PACKAGE_LOGGER or name.startswith(_PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_PACKAGE_LOGGER}.{name}")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    fmt: str = LOG_FORMAT,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional file path for logging output
        fmt: Record format string

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt)
    for handler in list(logger.handlers):
        if getattr(handler, "_tweenkit_handler", False):
            logger.removeHandler(handler)
            handler.close()

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._tweenkit_handler = True
        logger.addHandler(handler)

    return logger


def log_performance(func):
    """
    Decorator logging the wall time of each call at DEBUG level.

    The timing is skipped entirely when DEBUG is disabled for the
    function's module, so decorated hot paths stay cheap.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger(func.__module__)
        if not logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.debug(f"{func.__qualname__} took {elapsed_ms:.3f}ms")

    return wrapper


class LogContext:
    """
    Temporarily change a logger's level.

    Usage:
        with LogContext("tweenkit.scheduler", logging.DEBUG):
            scheduler.tick(16)
    """

    def __init__(self, name: str = _PACKAGE_LOGGER, level: Union[int, str] = logging.DEBUG):
        self.logger = logging.getLogger(name)
        self.level = level
        self._previous = None

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self._previous)
        return False


__all__ = [
    "LOG_FORMAT",
    "get_logger",
    "setup_logging",
    "log_performance",
    "LogContext",
]
