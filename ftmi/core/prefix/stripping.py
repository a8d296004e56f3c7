"""Module: stripping.py

Author: Michael Economou
Date: 2026-02-05

Remove a detected prefix from a filename.

Only a prefix at the very start of the name is removed; any other
filename comes back unchanged.
"""

from ftmi.config import DELIMITED_STRIP_CHARS
from ftmi.core.prefix.candidates import extract_prefix_with_delimiter
from ftmi.core.prefix.data_classes import (
    DelimiterOnly,
    DetectAll,
    PrefixedPath,
    PrefixOptions,
    SpecificPrefixes,
)


def remove_prefix(filename: str, prefix: str) -> str:
    """Strip ``prefix`` and any following whitespace from the start of ``filename``.

    >>> remove_prefix("IMG_001.jpg", "IMG_")
    '001.jpg'
    """
    if prefix and filename.startswith(prefix):
        return filename[len(prefix):].lstrip()
    return filename


def remove_prefix_with_delimiter(
    filename: str,
    prefix: str,
    open_marker: str,
    close_marker: str,
    strip_chars: str | None = None,
) -> str:
    """Strip ``open+prefix+close`` from the start of ``filename``.

    Args:
        strip_chars: Leading characters trimmed from the remainder;
            None trims whitespace.

    >>> remove_prefix_with_delimiter("[Artist] Song.mp3", "Artist", "[", "]")
    'Song.mp3'
    """
    decorated = f"{open_marker}{prefix}{close_marker}"
    if filename.startswith(decorated):
        return filename[len(decorated):].lstrip(strip_chars)
    return filename


def extract_prefix_from_filename(filename: str, options: PrefixOptions) -> tuple[str, str] | None:
    """Split a filename into (prefix, remainder) according to ``options.mode``.

    Delimited prefixes only count when the decorated prefix opens the name.
    DetectAll does not try free-form prefixes here; use the aggregator to
    decide which one applies to a directory.
    """
    mode = options.mode

    if isinstance(mode, SpecificPrefixes):
        for prefix in mode.prefixes:
            if filename.startswith(prefix):
                return prefix, filename[len(prefix):].lstrip()
        return None

    if isinstance(mode, DelimiterOnly | DetectAll):
        for open_marker, close_marker in mode.delimiters:
            prefix = extract_prefix_with_delimiter(filename, open_marker, close_marker)
            if prefix is None:
                continue
            decorated = f"{open_marker}{prefix}{close_marker}"
            if filename.startswith(decorated):
                return prefix, filename[len(decorated):].lstrip()

    return None


def strip_prefixed_name(filename: str, prefixed_path: PrefixedPath) -> str:
    """New name for ``filename`` once the selector's prefix is removed.

    Delimited prefixes are removed together with their markers and any
    leading spaces/underscores left behind.
    """
    if prefixed_path.delimiter is not None:
        open_marker, close_marker = prefixed_path.delimiter
        return remove_prefix_with_delimiter(
            filename, prefixed_path.prefix, open_marker, close_marker, DELIMITED_STRIP_CHARS
        )
    return remove_prefix(filename, prefixed_path.prefix)
