"""ftmi.core.prefix.data_classes.

Data classes for prefix detection.

Modes form a closed set: DelimiterOnly, SpecificPrefixes and DetectAll.
PrefixOptions bundles a mode with the occurrence threshold and the optional
filter pattern. CommonPrefix is one aggregated hypothesis; PrefixedPath is
what the selector hands to rename code.

Author: Michael Economou
Date: 2026-02-03
"""

import re
from dataclasses import dataclass, field, replace
from pathlib import Path

from ftmi.config import (
    BRACKET_FILTER_REGEX,
    DEFAULT_DELIMITERS,
    DEFAULT_FILTER_REGEX,
    DEFAULT_MIN_OCCURRENCES,
    PAREN_FILTER_REGEX,
)

Delimiter = tuple[str, str]


def _normalize_delimiters(delimiters) -> tuple[Delimiter, ...]:
    """Validate (open, close) pairs and drop repeated ones, keeping order."""
    pairs = []
    for pair in delimiters:
        open_marker, close_marker = pair
        if not open_marker or not close_marker:
            raise ValueError(f"Delimiter markers must be non-empty strings: {pair!r}")
        pairs.append((str(open_marker), str(close_marker)))
    return tuple(dict.fromkeys(pairs))


@dataclass(frozen=True)
class DelimiterOnly:
    """Only look for prefixes enclosed in the given delimiter pairs."""

    delimiters: tuple[Delimiter, ...] = DEFAULT_DELIMITERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "delimiters", _normalize_delimiters(self.delimiters))


@dataclass(frozen=True)
class SpecificPrefixes:
    """Only look for the given literal prefixes."""

    prefixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        prefixes = tuple(dict.fromkeys(str(p) for p in self.prefixes))
        if any(not p for p in prefixes):
            raise ValueError("Specific prefixes must be non-empty strings")
        object.__setattr__(self, "prefixes", prefixes)


@dataclass(frozen=True)
class DetectAll:
    """Delimiter extraction plus free-form separator/character candidates."""

    delimiters: tuple[Delimiter, ...] = DEFAULT_DELIMITERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "delimiters", _normalize_delimiters(self.delimiters))


PrefixMode = DelimiterOnly | SpecificPrefixes | DetectAll


@dataclass(frozen=True)
class PrefixOptions:
    """Options for a single prefix detection run.

    Attributes:
        mode: One of DelimiterOnly, SpecificPrefixes, DetectAll.
        min_occurrences: Minimum number of distinct files a prefix must cover.
        filter_regex: Optional pattern (string or compiled) the decorated
            prefix must match in find_longest_prefix. Advisory only.

    """

    mode: PrefixMode = field(default_factory=DetectAll)
    min_occurrences: int = DEFAULT_MIN_OCCURRENCES
    filter_regex: str | re.Pattern | None = DEFAULT_FILTER_REGEX

    def __post_init__(self) -> None:
        if not isinstance(self.mode, DelimiterOnly | SpecificPrefixes | DetectAll):
            raise TypeError(f"Unsupported prefix mode: {self.mode!r}")
        if self.min_occurrences < 0:
            raise ValueError("min_occurrences cannot be negative")

    @classmethod
    def default(cls) -> "PrefixOptions":
        """DetectAll over the default delimiters, bracket filter, min 2."""
        return cls()

    @classmethod
    def with_regex(cls, regex_pattern: str) -> "PrefixOptions":
        """Default options with a custom filter pattern."""
        return cls(filter_regex=regex_pattern)

    @classmethod
    def no_filter(cls) -> "PrefixOptions":
        """Default options accepting every prefix."""
        return cls(filter_regex=None)

    @classmethod
    def bracket_only(cls) -> "PrefixOptions":
        """Default options preferring [bracketed] prefixes."""
        return cls(filter_regex=BRACKET_FILTER_REGEX)

    @classmethod
    def paren_only(cls) -> "PrefixOptions":
        """Default options preferring (parenthesized) prefixes."""
        return cls(filter_regex=PAREN_FILTER_REGEX)

    def evolve(self, **changes) -> "PrefixOptions":
        """Copy with some fields replaced."""
        return replace(self, **changes)


@dataclass
class CommonPrefix:
    """A prefix hypothesis shared by several files in one directory.

    Attributes:
        prefix: The prefix text (without delimiter markers).
        delimiter: (open, close) pair it was found between, or None for
            free-form and literal prefixes.
        occurrences: Number of files covered; always len(files).
        files: Directory-relative filenames, without duplicates.

    """

    prefix: str
    delimiter: Delimiter | None
    occurrences: int
    files: list[str]

    @property
    def is_delimited(self) -> bool:
        return self.delimiter is not None

    @property
    def decorated(self) -> str:
        """Prefix with its markers, e.g. ``[Artist]``; bare prefix otherwise."""
        if self.delimiter is None:
            return self.prefix
        open_marker, close_marker = self.delimiter
        return f"{open_marker}{self.prefix}{close_marker}"


@dataclass
class PrefixedPath:
    """Selector output: one winning prefix and the absolute paths it covers."""

    prefix: str
    paths: list[Path]
    delimiter: Delimiter | None = None

    @property
    def decorated(self) -> str:
        if self.delimiter is None:
            return self.prefix
        return f"{self.delimiter[0]}{self.prefix}{self.delimiter[1]}"


@dataclass
class PrefixSelection:
    """Result of the best-prefix selection with filter bookkeeping.

    Attributes:
        prefixed_paths: Every candidate tied at the maximum occurrence count.
        filter_applied: A valid filter pattern was used.
        filter_bypassed: The filter matched nothing and was ignored.
        filter_invalid: The pattern failed to compile and was ignored.

    """

    prefixed_paths: list[PrefixedPath] = field(default_factory=list)
    filter_applied: bool = False
    filter_bypassed: bool = False
    filter_invalid: bool = False

    @property
    def max_occurrences(self) -> int:
        return max((len(p.paths) for p in self.prefixed_paths), default=0)
