"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-02-03

Helpers for creating loggers that never crash on console encoding problems.

Functions:
get_logger(name): Returns a propagating logger with UTF-8-safe logging methods.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message, retrying ASCII-safe on UnicodeEncodeError.
DevOnlyFilter:
Hides records flagged with extra={"dev_only": True} from the console.
"""

import logging
import re
from functools import partial

from ftmi.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "←": "<-",  # left arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS)))


def safe_text(text: str) -> str:
    """Replace Unicode symbols that legacy consoles cannot encode.

    Characters outside the replacement table are escaped with
    backslash sequences so the result is always ASCII.
    """
    text = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return text.encode("ascii", "backslashreplace").decode("ascii")


def safe_log(logger_func, message, *args, **kwargs) -> None:
    """Log through ``logger_func``, falling back to ASCII if encoding fails."""
    if not isinstance(message, str):
        message = repr(message)
    try:
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(message), *[safe_text(str(a)) for a in args], **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Wrap the level methods of ``logger`` with :func:`safe_log`."""
    for method_name in ("debug", "info", "warning", "error", "critical", "exception"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that delegates all output to the root logger.

    Args:
        name: Logger name, usually the calling module's ``__name__``.

    Returns:
        logging.Logger: Patched logger without handlers of its own.
    """
    logger = logging.getLogger(name or "ftmi")
    logger.propagate = True

    # Root logger owns console/file handlers
    if logger.handlers:
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Drop dev-only records unless SHOW_DEV_ONLY_IN_CONSOLE is enabled."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
