"""Module: database_manager.py

Author: Michael Economou
Date: 2026-02-06

SQLite connection management for the rename ledger.

Opens (creating on first use) the ledger database, validates and backs up a
corrupted file, creates or migrates the schema and hands out a RenameStore
bound to the connection. Every sqlite3 failure that escapes this module is
raised as StorageUnavailableError.
"""

import contextlib
import os
import shutil
import sqlite3
import threading
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from ftmi.config import DATABASE_TIMEOUT
from ftmi.core.errors import StorageUnavailableError
from ftmi.infra.db.migrations import (
    LEGACY_SCHEMA_VERSION,
    SCHEMA_VERSION,
    create_indexes,
    create_schema,
    has_legacy_table,
    migrate_schema,
)
from ftmi.infra.db.rename_store import RenameStore
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class DatabaseManager:
    """Owns the ledger connection and its schema."""

    SCHEMA_VERSION = SCHEMA_VERSION

    def __init__(self, db_path: str | os.PathLike | None = None):
        """Open the database, creating directories and schema as needed.

        Args:
            db_path: Optional custom database path; defaults to the per-user
                ledger location.

        Raises:
            StorageUnavailableError: The location cannot be determined or
                created, or the database cannot be opened.

        """
        if db_path:
            self.db_path = Path(db_path)
        else:
            from ftmi.utils.paths import AppPaths

            self.db_path = AppPaths.get_database_path()

        self._write_lock = threading.RLock()
        self._conn: sqlite3.Connection | None = None

        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(
                f"Cannot create ledger directory {self.db_path.parent}: {e}"
            ) from e

        if self.db_path.exists() and not self._validate_database_file():
            logger.warning(
                "[DatabaseManager] Corrupted database detected, backing up and recreating"
            )
            self._backup_corrupted_database()

        try:
            self._conn = sqlite3.connect(
                str(self.db_path), timeout=DATABASE_TIMEOUT, check_same_thread=False
            )
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode = WAL")
            self._conn.execute("PRAGMA synchronous = NORMAL")
            self._conn.execute("PRAGMA temp_store = MEMORY")
            self._initialize_database()
        except sqlite3.Error as e:
            self.close()
            raise StorageUnavailableError(f"Cannot open ledger {self.db_path}: {e}") from e

        logger.info("[DatabaseManager] Initialized with database: %s", self.db_path)

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageUnavailableError(f"Ledger {self.db_path} is closed")
        return self._conn

    def _current_version(self, cursor: sqlite3.Cursor) -> int | None:
        """Stored schema version, LEGACY_SCHEMA_VERSION for unversioned ledgers, None if empty."""
        cursor.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
        )
        if cursor.fetchone():
            cursor.execute("SELECT version FROM schema_version")
            row = cursor.fetchone()
            return row[0] if row else LEGACY_SCHEMA_VERSION

        if has_legacy_table(cursor):
            return LEGACY_SCHEMA_VERSION
        return None

    def _initialize_database(self) -> None:
        """Create or migrate the schema and bind the store."""
        cursor = self._conn.cursor()
        current_version = self._current_version(cursor)

        if current_version is None:
            logger.info("[DatabaseManager] Creating new database schema")
            create_schema(cursor)
            create_indexes(cursor)
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS schema_version (version INTEGER PRIMARY KEY)"
            )
            cursor.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (self.SCHEMA_VERSION,),
            )
            self._conn.commit()
        elif current_version < self.SCHEMA_VERSION:
            logger.info(
                "[DatabaseManager] Migrating database from v%d to v%d",
                current_version,
                self.SCHEMA_VERSION,
            )
            migrate_schema(cursor, current_version, self.SCHEMA_VERSION)
            create_indexes(cursor)
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS schema_version (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("DELETE FROM schema_version")
            cursor.execute(
                "INSERT INTO schema_version (version) VALUES (?)", (self.SCHEMA_VERSION,)
            )
            self._conn.commit()

        self.rename_store = RenameStore(self._conn)
        logger.debug("[DatabaseManager] Store instances initialized", extra={"dev_only": True})

    @contextlib.contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Context manager for atomic transactions.

        Commits on success and rolls back on any exception. sqlite3 errors
        are re-raised as StorageUnavailableError.

        Usage:
            with db_manager.transaction() as conn:
                conn.execute(...)
        """
        conn = self.connection
        with self._write_lock:
            try:
                yield conn
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise StorageUnavailableError(f"Ledger write failed: {e}") from e
            except Exception:
                conn.rollback()
                raise

    @contextlib.contextmanager
    def reading(self) -> Iterator[sqlite3.Connection]:
        """Context manager for reads; translates sqlite3 errors."""
        try:
            yield self.connection
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Ledger read failed: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._conn is not None:
            try:
                self._conn.close()
                logger.debug("[DatabaseManager] Connection closed", extra={"dev_only": True})
            except sqlite3.Error:
                logger.exception("[DatabaseManager] Error closing connection")
            finally:
                self._conn = None

    # ====================================================================
    # Database validation and recovery
    # ====================================================================

    def _validate_database_file(self) -> bool:
        """Validate database file integrity.

        Returns:
            True if database is valid, False if corrupted

        """
        if self.db_path.stat().st_size == 0:
            # sqlite3 treats an empty file as a new database
            return True

        try:
            test_conn = sqlite3.connect(str(self.db_path), timeout=5.0)
            try:
                result = test_conn.execute("PRAGMA quick_check").fetchone()
            finally:
                test_conn.close()

            is_ok = bool(result and result[0] == "ok")
            if not is_ok:
                logger.warning("[DatabaseManager] Database integrity check failed: %s", result)
        except sqlite3.Error as e:
            logger.warning("[DatabaseManager] Database validation failed: %s", e)
            is_ok = False

        return is_ok

    def _backup_corrupted_database(self) -> None:
        """Move a corrupted database aside so a fresh one can be created."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = self.db_path.with_suffix(f".corrupted.{timestamp}.db")

        try:
            shutil.move(str(self.db_path), str(backup_path))
            logger.info("[DatabaseManager] Corrupted database backed up to: %s", backup_path)

            for suffix in (".db-wal", ".db-shm"):
                sidecar = self.db_path.with_suffix(suffix)
                if sidecar.exists():
                    sidecar.unlink()
        except OSError as e:
            raise StorageUnavailableError(
                f"Cannot move corrupted ledger {self.db_path} aside: {e}"
            ) from e
