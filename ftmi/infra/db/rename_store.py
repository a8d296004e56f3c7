"""Module: rename_store.py

Author: Michael Economou
Date: 2026-02-06

SQL operations on the ``renames`` table.

The store only runs statements on the connection it is given; committing
and error translation belong to the caller (see DatabaseManager.transaction).
"""

import sqlite3

from ftmi.models.rename_record import RenameRecord, RenameStatus
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_RECORD_COLUMNS = "id, timestamp, old_path, new_path, directory, prefix_removed, operation_id, status"


class RenameStore:
    """Manages rename record storage and retrieval."""

    def __init__(self, connection: sqlite3.Connection):
        """Initialize RenameStore with a database connection.

        Args:
            connection: Active SQLite database connection

        """
        self.connection = connection

    def insert(
        self,
        timestamp: str,
        old_path: str,
        new_path: str,
        directory: str,
        prefix_removed: str,
        operation_id: str,
        status: str = RenameStatus.COMMITTED,
    ) -> int:
        """Insert one record and return its id."""
        cursor = self.connection.cursor()
        cursor.execute(
            """
            INSERT INTO renames
            (timestamp, old_path, new_path, directory, prefix_removed, operation_id, status)
            VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
            (timestamp, old_path, new_path, directory, prefix_removed, operation_id, status),
        )
        record_id: int = cursor.lastrowid
        return record_id

    def set_status(self, record_id: int, status: str) -> bool:
        cursor = self.connection.cursor()
        cursor.execute("UPDATE renames SET status = ? WHERE id = ?", (status, record_id))
        return cursor.rowcount > 0

    def delete(self, record_id: int) -> bool:
        cursor = self.connection.cursor()
        cursor.execute("DELETE FROM renames WHERE id = ?", (record_id,))
        return cursor.rowcount > 0

    def get_by_operation(self, operation_id: str) -> list[RenameRecord]:
        """All records of one operation, oldest first."""
        cursor = self.connection.cursor()
        cursor.execute(
            f"""
            SELECT {_RECORD_COLUMNS} FROM renames
            WHERE operation_id = ?
            ORDER BY timestamp ASC, id ASC
        """,
            (operation_id,),
        )
        return [RenameRecord.from_row(row) for row in cursor.fetchall()]

    def get_recent_operation_ids(self, limit: int) -> list[str]:
        """Distinct operation ids by earliest record, most recent first."""
        cursor = self.connection.cursor()
        cursor.execute(
            """
            SELECT operation_id, MIN(timestamp) AS first_timestamp, MIN(id) AS first_id
            FROM renames
            GROUP BY operation_id
            ORDER BY first_timestamp DESC, first_id DESC
            LIMIT ?
        """,
            (limit,),
        )
        return [row["operation_id"] for row in cursor.fetchall()]

    def get_operation_summaries(self, limit: int) -> list[sqlite3.Row]:
        """Per-operation aggregates in the same order as get_recent_operation_ids."""
        cursor = self.connection.cursor()
        cursor.execute(
            """
            SELECT operation_id,
                   MIN(timestamp) AS first_timestamp,
                   MIN(id) AS first_id,
                   COUNT(*) AS file_count
            FROM renames
            GROUP BY operation_id
            ORDER BY first_timestamp DESC, first_id DESC
            LIMIT ?
        """,
            (limit,),
        )
        return cursor.fetchall()

    def get_operation_directories(self, operation_id: str) -> list[str]:
        cursor = self.connection.cursor()
        cursor.execute(
            "SELECT DISTINCT directory FROM renames WHERE operation_id = ? ORDER BY directory",
            (operation_id,),
        )
        return [row["directory"] for row in cursor.fetchall()]

    def get_pending(self) -> list[RenameRecord]:
        cursor = self.connection.cursor()
        cursor.execute(
            f"SELECT {_RECORD_COLUMNS} FROM renames WHERE status = ? ORDER BY id ASC",
            (RenameStatus.PENDING,),
        )
        return [RenameRecord.from_row(row) for row in cursor.fetchall()]

    def delete_older_than(self, cutoff: str) -> int:
        """Delete records with a timestamp before ``cutoff``; return the count."""
        cursor = self.connection.cursor()
        cursor.execute("DELETE FROM renames WHERE timestamp < ?", (cutoff,))
        deleted = cursor.rowcount
        logger.debug(
            "[RenameStore] Deleted %d records older than %s",
            deleted,
            cutoff,
            extra={"dev_only": True},
        )
        return deleted

    def count(self) -> int:
        cursor = self.connection.cursor()
        cursor.execute("SELECT COUNT(*) FROM renames")
        return cursor.fetchone()[0]
