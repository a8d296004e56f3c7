"""ftmi.core.rename.tracked_rename.

Filesystem rename with a ledger record written around it.

The record is written as pending before the rename and committed after it,
so an interruption between the two leaves a trace that
RenameLedger.resolve_pending_renames can settle instead of an untracked
rename.

Author: Michael Economou
Date: 2026-02-07
"""

import os
import time
import uuid
from pathlib import Path

from ftmi.config import OPERATION_ID_PREFIX
from ftmi.core.errors import LedgerError, RenameFailedError, TargetExistsError
from ftmi.core.rename.ledger import RenameLedger
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def generate_operation_id() -> str:
    """Return a fresh operation id such as ``op_1718000000_3f9a0c1d``."""
    return f"{OPERATION_ID_PREFIX}{int(time.time())}_{uuid.uuid4().hex[:8]}"


def tracked_rename(
    ledger: RenameLedger,
    old_path: str | os.PathLike,
    new_path: str | os.PathLike,
    prefix_removed: str,
    operation_id: str,
) -> int:
    """Rename ``old_path`` to ``new_path`` and record it under ``operation_id``.

    Returns:
        The ledger record id.

    Raises:
        TargetExistsError: ``new_path`` already exists; nothing is touched.
        StorageUnavailableError: The pending record could not be written;
            the file is not renamed.
        RenameFailedError: The filesystem rename failed; the pending record
            is removed again.
    """
    old_path = Path(old_path)
    new_path = Path(new_path)

    if new_path.exists():
        raise TargetExistsError(old_path, new_path)

    record_id = ledger.begin_rename(old_path, new_path, old_path.parent, prefix_removed, operation_id)

    try:
        os.rename(old_path, new_path)
    except OSError as e:
        try:
            ledger.discard_pending(record_id)
        except LedgerError as discard_error:
            logger.warning(
                "[TrackedRename] Could not discard pending record #%d: %s",
                record_id,
                discard_error,
            )
        raise RenameFailedError(
            old_path, new_path, f"Failed to rename {old_path} -> {new_path}: {e}"
        ) from e

    try:
        ledger.commit_rename(record_id)
    except LedgerError as e:
        # The rename stands; undo still works from the pending record
        logger.error(
            "[TrackedRename] Renamed %s but could not commit record #%d: %s",
            old_path.name,
            record_id,
            e,
        )

    return record_id
