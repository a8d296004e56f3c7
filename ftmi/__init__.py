"""ftmi - File Tools for Mass Interaction.

Detect the naming prefix shared by files in a directory and strip it
with a reversible, ledger-backed batch rename.
"""

from ftmi.config import APP_VERSION as __version__
from ftmi.core.prefix import (
    CommonPrefix,
    DelimiterOnly,
    DetectAll,
    PrefixedPath,
    PrefixOptions,
    SpecificPrefixes,
    find_common_prefix,
    find_longest_prefix,
)
from ftmi.core.rename import RenameLedger, remove_prefix_from_files, tracked_rename

__all__ = [
    "CommonPrefix",
    "DelimiterOnly",
    "DetectAll",
    "PrefixOptions",
    "PrefixedPath",
    "RenameLedger",
    "SpecificPrefixes",
    "__version__",
    "find_common_prefix",
    "find_longest_prefix",
    "remove_prefix_from_files",
    "tracked_rename",
]
