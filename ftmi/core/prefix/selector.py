"""Module: selector.py

Author: Michael Economou
Date: 2026-02-04

Best-prefix selection on top of the aggregator.

The filter pattern is advisory: if it is invalid it is ignored with a
warning, and if it matches nothing the selection falls back to every
aggregated prefix. All prefixes tied at the highest occurrence count are
returned together.
"""

import os
import re
from pathlib import Path

from ftmi.core.errors import InvalidPatternError
from ftmi.core.prefix.aggregator import find_common_prefix
from ftmi.core.prefix.data_classes import CommonPrefix, PrefixedPath, PrefixOptions, PrefixSelection
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def compile_filter_pattern(pattern: str | re.Pattern) -> re.Pattern:
    """Compile a prefix filter pattern.

    Raises:
        InvalidPatternError: If the pattern does not compile.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def to_prefixed_path(directory: str | os.PathLike, group: CommonPrefix) -> PrefixedPath:
    """Build the absolute paths for a group's files."""
    base = Path(directory).absolute()
    return PrefixedPath(
        prefix=group.prefix,
        paths=[base / filename for filename in group.files],
        delimiter=group.delimiter,
    )


def select_longest_prefix(directory: str | os.PathLike, options: PrefixOptions) -> PrefixSelection:
    """Pick the winning prefix group(s) for ``directory``.

    Args:
        directory: Directory to scan.
        options: Detection options including the optional filter pattern.

    Returns:
        PrefixSelection with the tied winners and filter bookkeeping flags.

    Raises:
        PrefixScanError: The directory cannot be scanned.
    """
    all_prefixes = find_common_prefix(directory, options)
    selection = PrefixSelection()

    if not all_prefixes:
        return selection

    candidates = all_prefixes
    if options.filter_regex is not None:
        try:
            regex = compile_filter_pattern(options.filter_regex)
        except InvalidPatternError as e:
            logger.warning("[PrefixSelector] %s; filtering disabled", e)
            selection.filter_invalid = True
        else:
            selection.filter_applied = True
            filtered = [group for group in all_prefixes if regex.search(group.decorated)]
            if filtered:
                candidates = filtered
            else:
                selection.filter_bypassed = True
                logger.info(
                    "[PrefixSelector] Filter %r matched none of %d prefixes in %s, using all",
                    regex.pattern,
                    len(all_prefixes),
                    directory,
                )

    max_occurrences = max(group.occurrences for group in candidates)
    selection.prefixed_paths = [
        to_prefixed_path(directory, group)
        for group in candidates
        if group.occurrences == max_occurrences
    ]
    return selection


def find_longest_prefix(directory: str | os.PathLike, options: PrefixOptions) -> list[PrefixedPath]:
    """Return every prefix tied at the highest occurrence count.

    See :func:`select_longest_prefix` for the filter fallback rules.
    """
    return select_longest_prefix(directory, options).prefixed_paths
