"""Prefix detection module.

- candidates: per-filename delimiter extraction and free-form hypotheses
- aggregator: find_common_prefix over a directory
- selector: find_longest_prefix with the advisory filter
- stripping: remove a detected prefix from filenames

Author: Michael Economou
Date: 2026-02-04
"""

from ftmi.core.prefix.aggregator import find_common_prefix, list_directory_files
from ftmi.core.prefix.candidates import extract_prefix_with_delimiter, generate_prefix_candidates
from ftmi.core.prefix.data_classes import (
    CommonPrefix,
    DelimiterOnly,
    DetectAll,
    PrefixedPath,
    PrefixMode,
    PrefixOptions,
    PrefixSelection,
    SpecificPrefixes,
)
from ftmi.core.prefix.selector import (
    compile_filter_pattern,
    find_longest_prefix,
    select_longest_prefix,
)
from ftmi.core.prefix.stripping import (
    extract_prefix_from_filename,
    remove_prefix,
    remove_prefix_with_delimiter,
    strip_prefixed_name,
)

__all__ = [
    "CommonPrefix",
    "DelimiterOnly",
    "DetectAll",
    "PrefixMode",
    "PrefixOptions",
    "PrefixSelection",
    "PrefixedPath",
    "SpecificPrefixes",
    "compile_filter_pattern",
    "extract_prefix_from_filename",
    "extract_prefix_with_delimiter",
    "find_common_prefix",
    "find_longest_prefix",
    "generate_prefix_candidates",
    "list_directory_files",
    "remove_prefix",
    "remove_prefix_with_delimiter",
    "select_longest_prefix",
    "strip_prefixed_name",
]
