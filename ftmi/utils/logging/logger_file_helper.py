"""Module: logger_file_helper.py

Author: Michael Economou
Date: 2026-02-03

Attach rotating file handlers to a logger.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from ftmi.config import LOG_DATE_FORMAT, LOG_FILE_FORMAT


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> RotatingFileHandler:
    """Attach a UTF-8 rotating file handler to ``logger``.

    Args:
        logger: The logger to attach the handler to.
        log_path: Path to the log file. Parent folders are created.
        level: Minimum level written to this file.
        max_bytes: Size before rotating.
        backup_count: Rotated files to keep.

    Returns:
        The handler that was added.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler
