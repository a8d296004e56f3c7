"""Value objects shared between the ledger and its storage layer."""

from ftmi.models.rename_record import RenameRecord, RenameStatus

__all__ = ["RenameRecord", "RenameStatus"]
