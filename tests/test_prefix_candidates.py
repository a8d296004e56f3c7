"""
Module: test_prefix_candidates.py

Author: Michael Economou
Date: 2026-02-08

Tests for per-filename prefix extraction and free-form candidate generation.
"""

import pytest

from ftmi.core.prefix.candidates import (
    ends_with_open_delimiter,
    extract_prefix_with_delimiter,
    generate_prefix_candidates,
    strip_extension,
)


class TestExtractPrefixWithDelimiter:
    """Delimiter extraction takes the first open marker and the first close after it."""

    @pytest.mark.parametrize(
        ("filename", "open_marker", "close_marker", "expected"),
        [
            ("[Artist] Song.mp3", "[", "]", "Artist"),
            ("file[prefix]_001.txt", "[", "]", "prefix"),
            ("a[b]c[d].txt", "[", "]", "b"),
            ("[[nested]].txt", "[", "]", "[nested"),
            ("<<tag>>name.txt", "<<", ">>", "tag"),
            ('"quoted" name.txt', '"', '"', "quoted"),
            ("(2024) report.pdf", "(", ")", "2024"),
        ],
    )
    def test_extracts_first_span(self, filename, open_marker, close_marker, expected):
        """The span between the first open/close pair is returned."""
        assert extract_prefix_with_delimiter(filename, open_marker, close_marker) == expected

    @pytest.mark.parametrize(
        "filename",
        ["no_delimiter.txt", "[unclosed.txt", "closed]only.txt", "x]y[z.txt", "[]empty.txt"],
    )
    def test_returns_none(self, filename):
        """Missing markers or an empty span yield nothing."""
        assert extract_prefix_with_delimiter(filename, "[", "]") is None


class TestGeneratePrefixCandidates:
    """Free-form hypotheses from separators and character windows."""

    def test_separator_and_character_candidates(self):
        """Both separator joins and growing character prefixes are produced."""
        candidates = generate_prefix_candidates("IMG_2024_001.jpg")

        assert "IMG" in candidates
        assert "IMG_2024" in candidates
        assert "IM" in candidates
        assert "IMG_" in candidates
        assert "IMG_2024_00" in candidates

    def test_full_stem_and_single_character_are_excluded(self):
        """Character windows start at 2 and stop before the full stem."""
        candidates = generate_prefix_candidates("IMG_2024_001.jpg")

        assert "IMG_2024_001" not in candidates
        assert "I" not in candidates
        assert min(len(c) for c in candidates) == 2

    def test_extension_is_stripped_from_last_dot(self):
        """Only the last dot starts the extension."""
        candidates = generate_prefix_candidates("file.tar.gz")

        assert "file" in candidates
        assert "file.ta" in candidates
        assert "file.tar" not in candidates
        assert not any(c.endswith(".gz") for c in candidates)

    def test_character_window_is_capped(self):
        """Character candidates never reach 20 characters."""
        name = "abcdefghijklmnopqrstuvwxyz0123456789.txt"
        candidates = generate_prefix_candidates(name)

        assert max(len(c) for c in candidates) == 19
        assert "abcdefghijklmnopqrs" in candidates

    def test_open_delimiter_tails_are_skipped(self):
        """Candidates ending in an open bracket character are dropped."""
        candidates = generate_prefix_candidates("photo(1)_x.png")

        assert "photo" in candidates
        assert "photo(1" in candidates
        assert "photo(" not in candidates
        assert not any(ends_with_open_delimiter(c) for c in candidates)

    def test_empty_separator_parts_are_skipped(self):
        """A leading separator does not produce an empty candidate."""
        assert "" not in generate_prefix_candidates("-x.txt")
        assert generate_prefix_candidates("a_.txt") == ["a"]

    def test_name_without_separators(self):
        """Only character windows are produced."""
        assert generate_prefix_candidates("noext") == ["no", "noe", "noex"]

    def test_duplicates_are_kept(self):
        """The same prefix may come from a split and a character window."""
        candidates = generate_prefix_candidates("img_1.txt")

        assert candidates.count("img") == 2


def test_strip_extension():
    assert strip_extension("song.mp3") == "song"
    assert strip_extension("archive.tar.gz") == "archive.tar"
    assert strip_extension("README") == "README"
    assert strip_extension(".hidden") == ""


def test_ends_with_open_delimiter_custom_tails():
    assert ends_with_open_delimiter('say"', ('"',))
    assert not ends_with_open_delimiter('say"')
