"""ftmi.core.rename.batch.

Strip a detected prefix from every file of a PrefixedPath.

Renames run one by one under a single operation id. A failure on one file
is recorded on its item and the batch moves on to the next file.

Author: Michael Economou
Date: 2026-02-07
"""

from ftmi.core.errors import LedgerError, RenameError, TargetExistsError
from ftmi.core.prefix.data_classes import PrefixedPath
from ftmi.core.prefix.stripping import strip_prefixed_name
from ftmi.core.rename.data_classes import (
    BatchRenameItem,
    BatchRenameResult,
    RenamePlanItem,
    SkipReason,
)
from ftmi.core.rename.ledger import RenameLedger
from ftmi.core.rename.tracked_rename import generate_operation_id, tracked_rename
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def plan_prefix_removal(prefixed_path: PrefixedPath) -> list[RenamePlanItem]:
    """Preview the renames for ``prefixed_path`` without touching the disk."""
    plan = []
    for old_path in prefixed_path.paths:
        new_name = strip_prefixed_name(old_path.name, prefixed_path)
        new_path = old_path.with_name(new_name) if new_name else old_path

        skip_reason = None
        if not new_name:
            skip_reason = SkipReason.EMPTY_NAME
        elif new_name == old_path.name:
            skip_reason = SkipReason.UNCHANGED

        plan.append(RenamePlanItem(old_path, new_path, skip_reason))
    return plan


def remove_prefix_from_files(
    ledger: RenameLedger,
    prefixed_path: PrefixedPath,
    operation_id: str | None = None,
) -> BatchRenameResult:
    """Rename every file of ``prefixed_path`` without its prefix.

    Args:
        ledger: Ledger receiving one record per successful rename.
        prefixed_path: Selector output naming the prefix and the files.
        operation_id: Shared id for the batch; generated when omitted.

    Returns:
        BatchRenameResult with per-file outcomes and counts.
    """
    operation_id = operation_id or generate_operation_id()
    items: list[BatchRenameItem] = []

    for planned in plan_prefix_removal(prefixed_path):
        item = BatchRenameItem(planned.old_path, planned.new_path, skip_reason=planned.skip_reason)
        items.append(item)

        if planned.is_skipped:
            logger.debug(
                "[BatchRename] Skipping %s (%s)",
                planned.old_path.name,
                planned.skip_reason,
                extra={"dev_only": True},
            )
            continue

        try:
            item.record_id = tracked_rename(
                ledger, planned.old_path, planned.new_path, prefixed_path.prefix, operation_id
            )
            item.success = True
        except TargetExistsError as e:
            item.is_conflict = True
            item.error_message = str(e)
            logger.warning("[BatchRename] %s", e)
        except (RenameError, LedgerError) as e:
            item.error_message = str(e)
            logger.error("[BatchRename] %s: %s", planned.old_path.name, e)

    result = BatchRenameResult(operation_id=operation_id, items=items)
    logger.info(
        "[BatchRename] %s: %d renamed, %d failed, %d skipped (prefix %r)",
        operation_id,
        result.success_count,
        result.failure_count,
        result.skipped_count,
        prefixed_path.decorated,
    )
    return result
