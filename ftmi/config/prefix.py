"""Module: ftmi.config.prefix

Author: Michael Economou
Date: 2026-02-03

Prefix detection defaults: delimiter pairs, separators, candidate limits.
"""

# =====================================
# DELIMITERS
# =====================================

# (open, close) pairs scanned in DetectAll mode, in priority order
DEFAULT_DELIMITERS = (
    ("(", ")"),
    ("[", "]"),
    ("{", "}"),
    ('"', '"'),
    ("'", "'"),
)

BRACKET_FILTER_REGEX = r"\[.*\]"
PAREN_FILTER_REGEX = r"\(.*\)"

DEFAULT_FILTER_REGEX = BRACKET_FILTER_REGEX
DEFAULT_MIN_OCCURRENCES = 2

# =====================================
# FREE-FORM CANDIDATES
# =====================================

PREFIX_SEPARATORS = ("_", "-", ".", " ")

# A generated candidate may not end in one of these
CANDIDATE_EXCLUDED_TAILS = ("[", "(", "{")

# An aggregated free-form group may not end in one of these
AGGREGATE_EXCLUDED_TAILS = ("[", "(", "{", '"', "'")

# Character windows run from MIN up to (excluding) min(MAX, len(stem))
MIN_CHAR_PREFIX_LENGTH = 2
MAX_CHAR_PREFIX_LENGTH = 20

# =====================================
# STRIPPING
# =====================================

# Leading characters trimmed after removing a delimited prefix
DELIMITED_STRIP_CHARS = " _"
