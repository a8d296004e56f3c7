"""Module: ftmi.config.app

Author: Michael Economou
Date: 2026-02-03

Application-level configuration: app info, logging, rename ledger settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "ftmi"
APP_VERSION = "0.3.0"
APP_DESCRIPTION = "File Tools for Mass Interaction - common prefix detection and removal"

# Overrides the platform data directory when set
DATA_DIR_ENV_VAR = "FTMI_DATA_DIR"

# =====================================
# LOGGING CONFIGURATION
# =====================================

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "WARNING"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 5_000_000  # 5MB per file
LOG_FILE_BACKUP_COUNT = 3
LOG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 10_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 2

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# RENAME LEDGER
# =====================================

DATABASE_FILENAME = "renames.db"
DATABASE_TIMEOUT = 30.0

# Number of operations listed by history views
DEFAULT_HISTORY_LIMIT = 20

# Records older than this are removed by cleanup
DEFAULT_RETENTION_DAYS = 30

OPERATION_ID_PREFIX = "op_"
