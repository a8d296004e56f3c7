"""Module: aggregator.py

Author: Michael Economou
Date: 2026-02-04

Scan one directory and aggregate prefix hypotheses across its files.

Delimiter matches are grouped per (prefix, delimiter) pair. Free-form and
literal prefixes are grouped per prefix, de-duplicated, dropped when a
delimiter group already covers all of their files, and collapsed so that a
shorter prefix disappears once a longer extension of it covers the same
files (``IMG`` vs ``IMG_2024``).

All ordering is explicit: files are read in sorted order and every
order-sensitive step sorts with a total key.
"""

import os
from pathlib import Path

from ftmi.config import AGGREGATE_EXCLUDED_TAILS
from ftmi.core.errors import DirectoryNotFoundError, DirectoryReadError, NotADirectoryPathError
from ftmi.core.prefix.candidates import (
    ends_with_open_delimiter,
    extract_prefix_with_delimiter,
    generate_prefix_candidates,
)
from ftmi.core.prefix.data_classes import (
    CommonPrefix,
    Delimiter,
    DelimiterOnly,
    DetectAll,
    PrefixOptions,
    SpecificPrefixes,
)
from ftmi.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def list_directory_files(directory: str | os.PathLike) -> list[str]:
    """Return the sorted names of regular files directly inside ``directory``.

    Raises:
        DirectoryNotFoundError: ``directory`` does not exist.
        NotADirectoryPathError: ``directory`` is not a directory.
        DirectoryReadError: Listing failed (permissions, I/O).
    """
    path = Path(directory)
    if not path.exists():
        raise DirectoryNotFoundError(directory)
    if not path.is_dir():
        raise NotADirectoryPathError(directory)

    try:
        with os.scandir(path) as entries:
            names = [entry.name for entry in entries if entry.is_file()]
    except OSError as e:
        raise DirectoryReadError(directory, f"Could not read directory {directory}: {e}") from e

    return sorted(names)


def _sort_key(group: CommonPrefix) -> tuple:
    """Occurrences descending, delimiter groups first, then text."""
    return (
        -group.occurrences,
        group.delimiter is None,
        group.prefix,
        group.delimiter or ("", ""),
    )


def _collect(filenames: list[str], options: PrefixOptions):
    delimiter_groups: dict[tuple[str, Delimiter], list[str]] = {}
    free_groups: dict[str, list[str]] = {}
    mode = options.mode

    for filename in filenames:
        if isinstance(mode, DelimiterOnly | DetectAll):
            for open_marker, close_marker in mode.delimiters:
                prefix = extract_prefix_with_delimiter(filename, open_marker, close_marker)
                if prefix is not None:
                    key = (prefix, (open_marker, close_marker))
                    delimiter_groups.setdefault(key, []).append(filename)

        if isinstance(mode, SpecificPrefixes):
            for prefix in mode.prefixes:
                if filename.startswith(prefix):
                    free_groups.setdefault(prefix, []).append(filename)

        elif isinstance(mode, DetectAll):
            for prefix in generate_prefix_candidates(filename):
                free_groups.setdefault(prefix, []).append(filename)

    return delimiter_groups, free_groups


def _remove_redundant(candidates: list[CommonPrefix]) -> list[CommonPrefix]:
    """Drop candidates whose files are all covered by a kept textual extension.

    Walks longest prefixes first so the most specific hypothesis wins.
    """
    ordered = sorted(candidates, key=lambda c: (-len(c.prefix), -c.occurrences, c.prefix))

    kept: list[CommonPrefix] = []
    kept_sets: list[set[str]] = []
    for candidate in ordered:
        files = set(candidate.files)
        redundant = any(
            selected.prefix.startswith(candidate.prefix) and files <= selected_files
            for selected, selected_files in zip(kept, kept_sets)
        )
        if redundant:
            continue
        kept.append(candidate)
        kept_sets.append(files)

    return kept


def find_common_prefix(directory: str | os.PathLike, options: PrefixOptions) -> list[CommonPrefix]:
    """Aggregate prefix hypotheses for the files in ``directory``.

    Args:
        directory: Directory to scan (not recursive).
        options: Mode, occurrence threshold (filter_regex is ignored here).

    Returns:
        Groups sorted by occurrences descending, delimiter-based groups
        before free-form ones at equal counts, then by prefix text.

    Raises:
        PrefixScanError: The directory is missing, not a directory, or unreadable.
    """
    filenames = list_directory_files(directory)
    delimiter_groups, free_groups = _collect(filenames, options)
    min_occurrences = options.min_occurrences

    results: list[CommonPrefix] = []
    for (prefix, delimiter), files in delimiter_groups.items():
        if len(files) >= min_occurrences:
            results.append(CommonPrefix(prefix, delimiter, len(files), files))

    delimiter_file_sets = [set(group.files) for group in results]

    free_results: list[CommonPrefix] = []
    for prefix, files in free_groups.items():
        unique_files = sorted(set(files))
        if len(unique_files) < min_occurrences:
            continue

        # Delimiter matches take precedence for the same files
        if any(set(unique_files) <= covered for covered in delimiter_file_sets):
            continue

        if ends_with_open_delimiter(prefix, AGGREGATE_EXCLUDED_TAILS):
            continue

        free_results.append(CommonPrefix(prefix, None, len(unique_files), unique_files))

    surviving = _remove_redundant(free_results)
    logger.debug(
        "[PrefixAggregator] %s: %d files, %d delimiter groups, %d/%d free-form groups kept",
        directory,
        len(filenames),
        len(results),
        len(surviving),
        len(free_results),
        extra={"dev_only": True},
    )

    results.extend(surviving)
    results.sort(key=_sort_key)
    return results
