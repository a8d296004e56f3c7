"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-02-03

Logger factory with caching.
Keeps a single patched logger per module name.
"""

import logging
import threading

from ftmi.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe cache of named loggers."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create the cached logger for ``name``.

        Args:
            name: Logger name, typically ``__name__`` of the calling module.

        Returns:
            logging.Logger: Cached logger instance
        """
        name = name or "ftmi"
        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)
            return cls._loggers[name]

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Names of all cached loggers."""
        with cls._lock:
            return list(cls._loggers)


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience wrapper around :meth:`LoggerFactory.get_logger`."""
    return LoggerFactory.get_logger(name)
