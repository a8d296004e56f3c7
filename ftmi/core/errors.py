"""Module: errors.py

Author: Michael Economou
Date: 2026-02-03

Exception hierarchy for ftmi.

FtmiError
├── PrefixScanError          directory-level failures, abort that directory only
│   ├── DirectoryNotFoundError
│   ├── NotADirectoryPathError
│   └── DirectoryReadError
├── InvalidPatternError      filter regex does not compile
├── RenameError              per-file failures, tallied by batch code
│   ├── TargetExistsError
│   └── RenameFailedError
└── LedgerError
    ├── StorageUnavailableError
    └── OperationNotFoundError
"""


class FtmiError(Exception):
    """Base class for all ftmi errors."""


class PrefixScanError(FtmiError):
    """Raised when a directory cannot be scanned for prefixes."""

    def __init__(self, directory, message: str):
        super().__init__(message)
        self.directory = directory


class DirectoryNotFoundError(PrefixScanError):
    """Raised when the directory to scan does not exist."""

    def __init__(self, directory):
        super().__init__(directory, f"Directory does not exist: {directory}")


class NotADirectoryPathError(PrefixScanError):
    """Raised when the path to scan exists but is not a directory."""

    def __init__(self, directory):
        super().__init__(directory, f"Not a directory: {directory}")


class DirectoryReadError(PrefixScanError):
    """Raised when listing the directory fails (permissions, I/O)."""


class InvalidPatternError(FtmiError):
    """Raised when a prefix filter pattern does not compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


class RenameError(FtmiError):
    """Base class for per-file rename failures."""

    def __init__(self, old_path, new_path, message: str):
        super().__init__(message)
        self.old_path = old_path
        self.new_path = new_path


class TargetExistsError(RenameError):
    """Raised when the rename destination is already present."""

    def __init__(self, old_path, new_path):
        super().__init__(old_path, new_path, f"Target already exists: {new_path}")


class RenameFailedError(RenameError):
    """Raised when the filesystem rename itself fails."""


class LedgerError(FtmiError):
    """Base class for rename ledger failures."""


class StorageUnavailableError(LedgerError):
    """Raised when the ledger cannot be opened, created or written."""


class OperationNotFoundError(LedgerError):
    """Raised for an operation id that has no records."""

    def __init__(self, operation_id: str):
        super().__init__(f"Operation not found: {operation_id}")
        self.operation_id = operation_id
