"""Module: rename_record.py

Author: Michael Economou
Date: 2026-02-06

Immutable rename ledger record.
"""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


class RenameStatus:
    """Record states stored in the ``status`` column."""

    PENDING = "pending"
    COMMITTED = "committed"


@dataclass(frozen=True)
class RenameRecord:
    """One file rename as stored in the ledger.

    Attributes:
        id: Row id assigned by the store.
        timestamp: UTC time the record was written.
        old_path: Path before the rename.
        new_path: Path after the rename.
        directory: Directory the rename happened in.
        prefix_removed: Prefix text stripped by the rename.
        operation_id: Token grouping the records of one batch.
        status: ``pending`` until the filesystem rename is confirmed.

    """

    id: int
    timestamp: datetime
    old_path: Path
    new_path: Path
    directory: Path
    prefix_removed: str
    operation_id: str
    status: str = RenameStatus.COMMITTED

    @property
    def is_pending(self) -> bool:
        return self.status == RenameStatus.PENDING

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "RenameRecord":
        """Build a record from a ``renames`` row."""
        return cls(
            id=row["id"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
            old_path=Path(row["old_path"]),
            new_path=Path(row["new_path"]),
            directory=Path(row["directory"]),
            prefix_removed=row["prefix_removed"],
            operation_id=row["operation_id"],
            status=row["status"],
        )

    def __repr__(self) -> str:
        return f"<RenameRecord({self.old_path.name} -> {self.new_path.name}, {self.status})>"
