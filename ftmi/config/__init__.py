"""Module: ftmi.config

Author: Michael Economou
Date: 2026-02-03

Configuration package for ftmi.

- app: Application info, logging, rename ledger settings
- prefix: Prefix detection defaults (delimiters, separators, thresholds)

All settings are re-exported from this module:
    from ftmi.config import APP_NAME, DEFAULT_DELIMITERS
"""

from ftmi.config.app import *  # noqa: F401, F403
from ftmi.config.prefix import *  # noqa: F401, F403
