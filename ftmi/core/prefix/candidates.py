"""Module: candidates.py

Author: Michael Economou
Date: 2026-02-03

Per-filename prefix hypotheses.

- extract_prefix_with_delimiter: text between the first open marker and the
  first close marker after it (no nesting or balancing).
- generate_prefix_candidates: free-form hypotheses from separator splits and
  growing character windows over the extension-less name.
"""

from ftmi.config import (
    CANDIDATE_EXCLUDED_TAILS,
    MAX_CHAR_PREFIX_LENGTH,
    MIN_CHAR_PREFIX_LENGTH,
    PREFIX_SEPARATORS,
)


def extract_prefix_with_delimiter(filename: str, open_marker: str, close_marker: str) -> str | None:
    """Return the non-empty text enclosed by the first open/close pair.

    >>> extract_prefix_with_delimiter("file[prefix]_001.txt", "[", "]")
    'prefix'
    >>> extract_prefix_with_delimiter("no_delimiter.txt", "[", "]") is None
    True
    """
    open_pos = filename.find(open_marker)
    if open_pos == -1:
        return None

    start = open_pos + len(open_marker)
    close_pos = filename.find(close_marker, start)
    if close_pos == -1:
        return None

    prefix = filename[start:close_pos]
    return prefix or None


def strip_extension(filename: str) -> str:
    """Drop everything from the last dot onward."""
    dot = filename.rfind(".")
    return filename[:dot] if dot != -1 else filename


def ends_with_open_delimiter(
    candidate: str, tails: tuple[str, ...] = CANDIDATE_EXCLUDED_TAILS
) -> bool:
    return candidate.endswith(tails)


def generate_prefix_candidates(filename: str) -> list[str]:
    """Produce free-form prefix hypotheses for one filename.

    Separator candidates join the first i parts of a split on each of
    ``_ - . space``; character candidates are the first n characters for
    n from 2 up to (excluding) min(20, len(name)). Candidates ending in an
    open delimiter character are skipped. Duplicates are left in place.
    """
    name = strip_extension(filename)
    candidates = []

    for separator in PREFIX_SEPARATORS:
        parts = name.split(separator)
        if len(parts) < 2:
            continue
        for i in range(1, len(parts)):
            prefix = separator.join(parts[:i])
            if not prefix or ends_with_open_delimiter(prefix):
                continue
            candidates.append(prefix)

    # Single characters are too noisy to be useful
    for length in range(MIN_CHAR_PREFIX_LENGTH, min(MAX_CHAR_PREFIX_LENGTH, len(name))):
        candidate = name[:length]
        if ends_with_open_delimiter(candidate):
            continue
        candidates.append(candidate)

    return candidates
