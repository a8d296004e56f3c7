"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-02-03

ConfigureLogger sets up root logging for the ftmi entry points.
Console gets LOG_CONSOLE_LEVEL and up (dev-only records filtered),
the activity log gets LOG_FILE_LEVEL and up, and an optional debug
log receives everything.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from ftmi.config import (
    LOG_CONSOLE_FORMAT,
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from ftmi.utils.logging.logger_file_helper import add_file_handler
from ftmi.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configure application-wide logging on the root logger.

    Handlers are only installed once per process; a second instance
    reuses whatever the first one set up.
    """

    def __init__(
        self,
        log_name: str = "ftmi",
        log_dir: str | None = None,
        console_level: int | None = None,
        file_enabled: bool = LOG_TO_FILE,
    ):
        """Initialize and configure the root logger.

        Args:
            log_name: Base name for the log files.
            log_dir: Directory for log files; file logging is skipped when None.
            console_level: Overrides LOG_CONSOLE_LEVEL when given.
            file_enabled: Write the activity log (and optional debug log).
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels

        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.WARNING)

        if getattr(self.logger, "_ftmi_configured", False):
            for handler in self.logger.handlers:
                if getattr(handler, "_ftmi_console", False):
                    handler.setLevel(console_level)
            return

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if file_enabled and log_dir:
            timestamp = datetime.now().strftime("%Y%m%d")
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )
            if LOG_DEBUG_FILE_ENABLED:
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                    level=logging.DEBUG,
                    max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                )

        self.logger._ftmi_configured = True

    def _setup_console_handler(self, level: int) -> None:
        """Console handler on stderr with DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
        console_handler._ftmi_console = True
        self.logger.addHandler(console_handler)
