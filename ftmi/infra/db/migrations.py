"""Module: migrations.py

Author: Michael Economou
Date: 2026-02-06

Schema creation and migration for the rename ledger.

Version 1 is the layout written by the first release of the tool: a single
``renames`` table and no ``schema_version`` table. Version 2 adds the
``status`` column used by pending/committed tracking.
"""

import sqlite3

from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

SCHEMA_VERSION = 2
LEGACY_SCHEMA_VERSION = 1


def create_schema(cursor: sqlite3.Cursor) -> None:
    """Create the current schema."""
    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS renames (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            timestamp TEXT NOT NULL,
            old_path TEXT NOT NULL,
            new_path TEXT NOT NULL,
            directory TEXT NOT NULL,
            prefix_removed TEXT NOT NULL,
            operation_id TEXT NOT NULL,
            status TEXT NOT NULL DEFAULT 'committed'
        )
    """
    )


def create_indexes(cursor: sqlite3.Cursor) -> None:
    """Create the lookup indexes (by operation and by recency)."""
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_operation_id ON renames(operation_id)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_timestamp ON renames(timestamp)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_status ON renames(status)")


def has_legacy_table(cursor: sqlite3.Cursor) -> bool:
    """True when a ``renames`` table exists without version bookkeeping."""
    cursor.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='renames'")
    return cursor.fetchone() is not None


def _column_names(cursor: sqlite3.Cursor, table: str) -> set[str]:
    cursor.execute(f"PRAGMA table_info({table})")
    return {row[1] for row in cursor.fetchall()}


def migrate_schema(cursor: sqlite3.Cursor, from_version: int, to_version: int) -> None:
    """Migrate from older schema versions."""
    logger.info("[migrations] Migrating from version %d to %d", from_version, to_version)

    # Migration from version 1 to 2: pending/committed status
    if from_version < 2 <= to_version:
        if "status" not in _column_names(cursor, "renames"):
            cursor.execute(
                "ALTER TABLE renames ADD COLUMN status TEXT NOT NULL DEFAULT 'committed'"
            )
            logger.info("[migrations] Added status column to renames")

    logger.info("[migrations] Migration completed")
