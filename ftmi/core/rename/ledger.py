"""ftmi.core.rename.ledger.

Persistent rename ledger with undo support.

Every rename is stored as a RenameRecord grouped by operation id. An
operation can later be reversed file by file: a record is undone only while
its new path still exists and its old path is free, so undo never
overwrites a file that appeared since. Records are never marked as undone;
running undo twice on the same operation reports every file as a failure
the second time.

Author: Michael Economou
Date: 2026-02-07
"""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ftmi.config import DEFAULT_HISTORY_LIMIT
from ftmi.core.errors import OperationNotFoundError
from ftmi.core.rename.data_classes import OperationSummary
from ftmi.infra.db.database_manager import DatabaseManager
from ftmi.models.rename_record import RenameRecord, RenameStatus
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(moment: datetime) -> str:
    return moment.isoformat(timespec="microseconds")


def _summarize_names(paths: list[Path], limit: int) -> str:
    names = ", ".join(path.name for path in paths[:limit])
    return names + ("..." if len(paths) > limit else "")


class RenameLedger:
    """Records renames and reverses whole operations.

    Usage:
        with RenameLedger(db_path) as ledger:
            ledger.record_rename(old, new, directory, "IMG_", operation_id)
            ledger.undo_operation(operation_id)
    """

    def __init__(self, db_path: str | os.PathLike | None = None):
        """Open (creating on first use) the ledger database.

        Raises:
            StorageUnavailableError: The ledger cannot be opened or created.
        """
        self._db = DatabaseManager(db_path)
        self._store = self._db.rename_store
        logger.debug("[RenameLedger] Using ledger at %s", self._db.db_path, extra={"dev_only": True})

    @property
    def db_path(self) -> Path:
        return self._db.db_path

    def __enter__(self) -> "RenameLedger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._db.close()

    # ====================================================================
    # Writing
    # ====================================================================

    def _insert(
        self,
        old_path: str | os.PathLike,
        new_path: str | os.PathLike,
        directory: str | os.PathLike,
        prefix_removed: str,
        operation_id: str,
        status: str,
    ) -> int:
        with self._db.transaction():
            return self._store.insert(
                _format_timestamp(_utc_now()),
                str(old_path),
                str(new_path),
                str(directory),
                prefix_removed,
                operation_id,
                status,
            )

    def record_rename(
        self,
        old_path: str | os.PathLike,
        new_path: str | os.PathLike,
        directory: str | os.PathLike,
        prefix_removed: str,
        operation_id: str,
    ) -> int:
        """Append a committed record for a rename that already happened.

        Returns:
            The id assigned to the record.

        Raises:
            StorageUnavailableError: The append failed.
        """
        record_id = self._insert(
            old_path, new_path, directory, prefix_removed, operation_id, RenameStatus.COMMITTED
        )
        logger.debug(
            "[RenameLedger] Recorded #%d %s -> %s (%s)",
            record_id,
            old_path,
            new_path,
            operation_id,
            extra={"dev_only": True},
        )
        return record_id

    def begin_rename(
        self,
        old_path: str | os.PathLike,
        new_path: str | os.PathLike,
        directory: str | os.PathLike,
        prefix_removed: str,
        operation_id: str,
    ) -> int:
        """Write a pending record ahead of the filesystem rename."""
        return self._insert(
            old_path, new_path, directory, prefix_removed, operation_id, RenameStatus.PENDING
        )

    def commit_rename(self, record_id: int) -> None:
        """Mark a pending record as committed."""
        with self._db.transaction():
            self._store.set_status(record_id, RenameStatus.COMMITTED)

    def discard_pending(self, record_id: int) -> None:
        """Delete a pending record whose rename did not happen."""
        with self._db.transaction():
            self._store.delete(record_id)

    # ====================================================================
    # Reading
    # ====================================================================

    def get_recent_operations(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[str]:
        """Up to ``limit`` operation ids, most recently started first."""
        with self._db.reading():
            return self._store.get_recent_operation_ids(limit)

    def get_operation_renames(self, operation_id: str) -> list[RenameRecord]:
        """All records of ``operation_id``, oldest first.

        Raises:
            OperationNotFoundError: No record carries this id.
        """
        with self._db.reading():
            records = self._store.get_by_operation(operation_id)
        if not records:
            raise OperationNotFoundError(operation_id)
        return records

    def get_operation_summaries(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[OperationSummary]:
        """Summaries in the same order as :meth:`get_recent_operations`."""
        with self._db.reading():
            rows = self._store.get_operation_summaries(limit)
            return [
                OperationSummary(
                    operation_id=row["operation_id"],
                    started_at=datetime.fromisoformat(row["first_timestamp"]),
                    file_count=row["file_count"],
                    directories=[
                        Path(directory)
                        for directory in self._store.get_operation_directories(row["operation_id"])
                    ],
                )
                for row in rows
            ]

    # ====================================================================
    # Undo
    # ====================================================================

    @staticmethod
    def _is_reversible(record: RenameRecord) -> bool:
        return record.new_path.exists() and not record.old_path.exists()

    def can_undo_operation(self, operation_id: str) -> tuple[bool, str]:
        """Check whether every file of an operation can be reverted.

        Returns:
            Tuple of (can_undo, reason_if_not)
        """
        try:
            records = self.get_operation_renames(operation_id)
        except OperationNotFoundError:
            return False, "Operation not found"

        missing = [record.new_path for record in records if not record.new_path.exists()]
        if missing:
            return False, f"Missing files: {_summarize_names(missing, 3)}"

        occupied = [record.old_path for record in records if record.old_path.exists()]
        if occupied:
            return False, f"Original names already in use: {_summarize_names(occupied, 3)}"

        return True, ""

    def undo_operation(self, operation_id: str) -> tuple[int, int]:
        """Reverse the renames of an operation, most recent first.

        Files whose state changed since the rename (new path gone or old path
        taken) are counted as failures and left alone.

        Returns:
            Tuple of (success_count, failure_count)

        Raises:
            OperationNotFoundError: No record carries this id.
        """
        records = self.get_operation_renames(operation_id)
        success_count = 0
        failure_count = 0

        for record in reversed(records):
            if not self._is_reversible(record):
                failure_count += 1
                logger.warning(
                    "[RenameLedger] Cannot undo %s (file state changed)", record.new_path
                )
                continue

            try:
                os.rename(record.new_path, record.old_path)
            except OSError as e:
                failure_count += 1
                logger.error(
                    "[RenameLedger] Failed to undo %s -> %s: %s",
                    record.new_path,
                    record.old_path,
                    e,
                )
                continue

            success_count += 1
            logger.debug(
                "[RenameLedger] Reverted: %s -> %s",
                record.new_path.name,
                record.old_path.name,
                extra={"dev_only": True},
            )

        logger.info(
            "[RenameLedger] Undid %d/%d renames for %s",
            success_count,
            len(records),
            operation_id,
        )
        return success_count, failure_count

    # ====================================================================
    # Maintenance
    # ====================================================================

    def cleanup_old_records(self, days: int) -> int:
        """Delete records older than ``days`` days, whatever their undo state.

        Returns:
            Number of records deleted.
        """
        if days < 0:
            raise ValueError(f"days must be non-negative, got {days}")

        try:
            cutoff = _format_timestamp(_utc_now() - timedelta(days=days))
        except OverflowError:
            # Cutoff predates datetime.min; no record can be that old
            logger.info("[RenameLedger] Retention of %d days keeps every record", days)
            return 0
        with self._db.transaction():
            deleted = self._store.delete_older_than(cutoff)

        logger.info("[RenameLedger] Cleaned up %d records older than %d days", deleted, days)
        return deleted

    def resolve_pending_renames(self) -> tuple[int, int]:
        """Settle pending records left by an interrupted rename.

        A record is committed when the rename visibly happened (new path
        present, old path free) and discarded when it visibly did not.
        Anything else stays pending.

        Returns:
            Tuple of (committed, discarded)
        """
        with self._db.reading():
            pending = self._store.get_pending()

        committed = 0
        discarded = 0
        with self._db.transaction():
            for record in pending:
                new_exists = record.new_path.exists()
                old_exists = record.old_path.exists()
                if new_exists and not old_exists:
                    self._store.set_status(record.id, RenameStatus.COMMITTED)
                    committed += 1
                elif old_exists and not new_exists:
                    self._store.delete(record.id)
                    discarded += 1
                else:
                    logger.warning(
                        "[RenameLedger] Leaving record #%d pending: %s -> %s is ambiguous",
                        record.id,
                        record.old_path,
                        record.new_path,
                    )

        if pending:
            logger.info(
                "[RenameLedger] Resolved pending records: %d committed, %d discarded, %d left",
                committed,
                discarded,
                len(pending) - committed - discarded,
            )
        return committed, discarded


# Global instance for easy access
_rename_ledger: RenameLedger | None = None


def get_rename_ledger(db_path: str | os.PathLike | None = None) -> RenameLedger:
    """Get global RenameLedger instance (``db_path`` only used on first call)."""
    global _rename_ledger
    if _rename_ledger is None:
        _rename_ledger = RenameLedger(db_path)
    return _rename_ledger
