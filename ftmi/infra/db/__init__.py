"""Database infrastructure for the rename ledger.

Author: Michael Economou
Date: 2026-02-06
"""

from ftmi.infra.db.database_manager import DatabaseManager
from ftmi.infra.db.rename_store import RenameStore

__all__ = [
    "DatabaseManager",
    "RenameStore",
]
