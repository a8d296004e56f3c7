"""ftmi.core.rename.data_classes.

Data classes for planning and executing a batch prefix removal, and for
summarising ledger operations.

Author: Michael Economou
Date: 2026-02-07
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


class SkipReason:
    """Reasons a planned rename is not executed."""

    UNCHANGED = "unchanged"
    EMPTY_NAME = "empty_name"


@dataclass(frozen=True)
class RenamePlanItem:
    """One proposed rename in a prefix removal preview.

    Attributes:
        old_path: Current absolute path.
        new_path: Path after stripping the prefix.
        skip_reason: None when the rename should run, else a SkipReason value.

    """

    old_path: Path
    new_path: Path
    skip_reason: str | None = None

    @property
    def is_skipped(self) -> bool:
        return self.skip_reason is not None


@dataclass
class BatchRenameItem:
    """Outcome of one planned rename.

    Attributes:
        old_path: Original path.
        new_path: Target path.
        success: True if the rename happened and was recorded.
        error_message: Error description when the rename failed.
        skip_reason: Set when the item was skipped without trying.
        is_conflict: True when the target already existed.
        record_id: Ledger record id for successful renames.

    """

    old_path: Path
    new_path: Path
    success: bool = False
    error_message: str = ""
    skip_reason: str | None = None
    is_conflict: bool = False
    record_id: int | None = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


@dataclass
class BatchRenameResult:
    """Result of a batch prefix removal under one operation id."""

    operation_id: str
    items: list[BatchRenameItem] = field(default_factory=list)
    success_count: int = 0
    failure_count: int = 0
    skipped_count: int = 0
    conflicts_count: int = 0

    def __post_init__(self) -> None:
        """Calculate counts from items."""
        self.recount()

    def recount(self) -> None:
        self.success_count = sum(1 for item in self.items if item.success)
        self.skipped_count = sum(1 for item in self.items if item.skipped)
        self.failure_count = sum(
            1 for item in self.items if not item.success and not item.skipped
        )
        self.conflicts_count = sum(1 for item in self.items if item.is_conflict)

    @property
    def renamed_files(self) -> list[Path]:
        return [item.new_path for item in self.items if item.success]


@dataclass(frozen=True)
class OperationSummary:
    """Listing entry for one ledger operation."""

    operation_id: str
    started_at: datetime
    file_count: int
    directories: list[Path] = field(default_factory=list)

    @property
    def display_text(self) -> str:
        started = self.started_at.strftime("%Y-%m-%d %H:%M:%S")
        return f"Renamed {self.file_count} file(s) - {started}"
