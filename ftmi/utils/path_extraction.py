"""Module: path_extraction.py

Author: Michael Economou
Date: 2026-02-05

Pull filesystem-looking paths out of free text (logs, terminal output,
pasted listings).

Recognized forms: Unix absolute paths, ./ and ../ relative paths, Windows
drive-letter paths and UNC shares. A path must be bounded by the start or
end of the line, whitespace, or a quote. When one extracted path is an
ancestor of another, only the longer one is kept.
"""

import re
from collections.abc import Iterable

_BOUNDARY_BEFORE = r"""(?<![^\s"'])"""
_BOUNDARY_AFTER = r"""(?![^\s"'])"""

PATH_PATTERN = re.compile(
    _BOUNDARY_BEFORE
    + r"""
    (
        # Unix absolute paths
        /(?:[^/\s"']+/)*[^/\s"']+
      |
        # Unix relative paths with ./ or ../
        \.\.?/(?:[^/\s"']+/)*[^/\s"']+
      |
        # Windows paths with drive letter
        [A-Za-z]:\\(?:[^\\/:*?"<>|\s]+\\)*[^\\/:*?"<>|\s]+
      |
        # UNC paths
        \\\\[^\\/:*?"<>|\s]+\\[^\\/:*?"<>|\s]+(?:\\[^\\/:*?"<>|\s]+)*
    )
    """
    + _BOUNDARY_AFTER,
    re.VERBOSE,
)


def normalize_path(path: str) -> str:
    """Use forward slashes and drop trailing separators."""
    return path.replace("\\", "/").rstrip("/")


def is_subpath_of(potential_sub: str, parent: str) -> bool:
    """True if ``potential_sub`` is a strict ancestor of ``parent``.

    Comparison is by whole path segments: ``/home/use`` is not an
    ancestor of ``/home/user``.
    """
    normalized_sub = normalize_path(potential_sub)
    normalized_parent = normalize_path(parent)

    if normalized_sub == normalized_parent:
        return False

    if normalized_parent.startswith(normalized_sub):
        return normalized_parent[len(normalized_sub):].startswith("/")

    return False


def deduplicate_paths(paths: Iterable[str]) -> list[str]:
    """Drop every path that is an ancestor of another one.

    Returns:
        The surviving unique paths, sorted.
    """
    by_length = sorted(set(paths), key=lambda p: (-len(p), p))

    result: list[str] = []
    for path in by_length:
        if not any(is_subpath_of(path, existing) for existing in result):
            result.append(path)

    return sorted(result)


def extract_paths_from_text(text: str) -> list[str]:
    """Extract deduplicated, sorted paths from arbitrary text."""
    found = set()
    for line in text.splitlines():
        for match in PATH_PATTERN.finditer(line):
            if match.group(1):
                found.add(match.group(1))
    return deduplicate_paths(found)
