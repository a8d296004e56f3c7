"""Module: paths.py

Author: Michael Economou
Date: 2026-02-03

Centralized path management for ftmi.

Platform-specific user data directory:
- Windows: %LOCALAPPDATA%/ftmi/
- Linux: $XDG_DATA_HOME/ftmi/ or ~/.local/share/ftmi/
- macOS: ~/Library/Application Support/ftmi/

The FTMI_DATA_DIR environment variable overrides all of the above.

Usage:
    from ftmi.utils.paths import AppPaths

    db_path = AppPaths.get_database_path()
    logs_dir = AppPaths.get_logs_dir()
"""

import os
import platform
from pathlib import Path

from ftmi.config import APP_NAME, DATA_DIR_ENV_VAR, DATABASE_FILENAME
from ftmi.core.errors import StorageUnavailableError
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AppPaths:
    """Centralized path management for the application.

    Directory Structure:
        <user_data_dir>/
        ├── logs/            # Log files
        └── data/
            └── renames.db   # Rename ledger
    """

    _user_data_dir: Path | None = None
    _initialized: bool = False

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        """Get platform-specific user data directory.

        Raises:
            RuntimeError: If the home directory cannot be determined.
        """
        override = os.environ.get(DATA_DIR_ENV_VAR)
        if override:
            return Path(override).expanduser()

        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = Path(os.environ.get("USERPROFILE") or Path.home()) / "AppData" / "Local"
            return Path(base) / APP_NAME

        elif system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        else:
            xdg_data = os.environ.get("XDG_DATA_HOME")
            if xdg_data:
                return Path(xdg_data) / APP_NAME
            return Path.home() / ".local" / "share" / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get the user data directory, creating it if necessary.

        Raises:
            StorageUnavailableError: If the directory cannot be determined or created.
        """
        if cls._user_data_dir is None:
            try:
                cls._user_data_dir = cls._get_platform_data_dir()
            except RuntimeError as e:
                raise StorageUnavailableError(f"Could not find home directory: {e}") from e

        try:
            cls._user_data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(
                f"Could not create data directory {cls._user_data_dir}: {e}"
            ) from e

        if not cls._initialized:
            logger.debug("[AppPaths] User data directory: %s", cls._user_data_dir)
            cls._initialized = True

        return cls._user_data_dir

    @classmethod
    def _get_subdir(cls, name: str) -> Path:
        subdir = cls.get_user_data_dir() / name
        try:
            subdir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(f"Could not create {subdir}: {e}") from e
        return subdir

    @classmethod
    def get_database_path(cls) -> Path:
        """Path to the rename ledger database in the data/ subdirectory."""
        return cls._get_subdir("data") / DATABASE_FILENAME

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Path to the logs directory."""
        return cls._get_subdir("logs")

    @classmethod
    def reset(cls) -> None:
        """Reset cached paths (mainly for testing)."""
        cls._user_data_dir = None
        cls._initialized = False
