"""Rename ledger and batch prefix removal.

- ledger: RenameLedger storing rename records and reversing operations
- tracked_rename: filesystem rename with a pending/committed ledger record
- batch: preview and execute prefix removal for a PrefixedPath
- data_classes: plan, result and summary containers

Author: Michael Economou
Date: 2026-02-07
"""

from ftmi.core.rename.batch import plan_prefix_removal, remove_prefix_from_files
from ftmi.core.rename.data_classes import (
    BatchRenameItem,
    BatchRenameResult,
    OperationSummary,
    RenamePlanItem,
    SkipReason,
)
from ftmi.core.rename.ledger import RenameLedger, get_rename_ledger
from ftmi.core.rename.tracked_rename import generate_operation_id, tracked_rename

__all__ = [
    "BatchRenameItem",
    "BatchRenameResult",
    "OperationSummary",
    "RenameLedger",
    "RenamePlanItem",
    "SkipReason",
    "generate_operation_id",
    "get_rename_ledger",
    "plan_prefix_removal",
    "remove_prefix_from_files",
    "tracked_rename",
]
