"""
Module: test_prefix_aggregator.py

Author: Michael Economou
Date: 2026-02-08

Tests for find_common_prefix: grouping, thresholds, delimiter precedence,
redundancy collapse and deterministic ordering.
"""

import pytest

from ftmi.core.errors import (
    DirectoryNotFoundError,
    NotADirectoryPathError,
    PrefixScanError,
)
from ftmi.core.prefix import (
    CommonPrefix,
    DelimiterOnly,
    DetectAll,
    PrefixOptions,
    SpecificPrefixes,
    find_common_prefix,
    list_directory_files,
)


def _prefixes(groups):
    return [(g.prefix, g.delimiter) for g in groups]


class TestDelimiterOnly:
    """Delimiter-based grouping."""

    def test_bracketed_artist(self, make_files):
        """Two bracketed files form exactly one group."""
        directory = make_files(["[Artist] Song.mp3", "[Artist] Track2.mp3"])
        options = PrefixOptions(mode=DelimiterOnly([("[", "]")]), min_occurrences=2)

        result = find_common_prefix(directory, options)

        assert result == [
            CommonPrefix(
                prefix="Artist",
                delimiter=("[", "]"),
                occurrences=2,
                files=["[Artist] Song.mp3", "[Artist] Track2.mp3"],
            )
        ]

    def test_threshold(self, make_files):
        """Groups below min_occurrences are dropped."""
        directory = make_files(["[A] 1.txt", "[A] 2.txt", "[B] 1.txt"])
        options = PrefixOptions(mode=DelimiterOnly([("[", "]")]), min_occurrences=2)

        assert _prefixes(find_common_prefix(directory, options)) == [("A", ("[", "]"))]

    def test_same_prefix_different_delimiters_are_separate(self, make_files):
        """The key is (prefix, delimiter)."""
        directory = make_files(["[x] 1.txt", "[x] 2.txt", "(x) 1.txt", "(x) 2.txt"])
        options = PrefixOptions(
            mode=DelimiterOnly([("[", "]"), ("(", ")")]), min_occurrences=2
        )

        result = find_common_prefix(directory, options)

        assert _prefixes(result) == [("x", ("(", ")")), ("x", ("[", "]"))]

    def test_no_free_form_candidates(self, make_files):
        """DelimiterOnly never reports separator prefixes."""
        directory = make_files(["IMG_1.jpg", "IMG_2.jpg"])
        options = PrefixOptions(mode=DelimiterOnly(), min_occurrences=2)

        assert find_common_prefix(directory, options) == []


class TestSpecificPrefixes:
    """Literal prefix grouping."""

    def test_img_and_doc(self, make_files):
        """Each configured prefix gets its own group."""
        directory = make_files(["IMG_001.jpg", "IMG_002.jpg", "DOC_1.pdf"])
        options = PrefixOptions(mode=SpecificPrefixes(["IMG_", "DOC_"]), min_occurrences=1)

        result = find_common_prefix(directory, options)

        assert result == [
            CommonPrefix("IMG_", None, 2, ["IMG_001.jpg", "IMG_002.jpg"]),
            CommonPrefix("DOC_", None, 1, ["DOC_1.pdf"]),
        ]

    def test_prefix_must_start_the_name(self, make_files):
        """A prefix in the middle of a name does not count."""
        directory = make_files(["my_IMG_1.jpg", "IMG_2.jpg"])
        options = PrefixOptions(mode=SpecificPrefixes(["IMG_"]), min_occurrences=1)

        assert find_common_prefix(directory, options)[0].files == ["IMG_2.jpg"]

    def test_nested_literals_collapse(self, make_files):
        """A shorter literal covering the same files as a longer one is dropped."""
        directory = make_files(["IMG_2024_1.jpg", "IMG_2024_2.jpg"])
        options = PrefixOptions(mode=SpecificPrefixes(["IMG", "IMG_2024"]), min_occurrences=1)

        assert _prefixes(find_common_prefix(directory, options)) == [("IMG_2024", None)]

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            SpecificPrefixes(["IMG_", ""])


class TestDetectAll:
    """Delimiter and free-form detection together."""

    def test_redundancy_collapse(self, make_files):
        """Only the longest textual extension covering the same files survives."""
        directory = make_files(["img_1.txt", "img_2.txt", "img_3.txt"])

        result = find_common_prefix(directory, PrefixOptions(mode=DetectAll(), min_occurrences=2))

        assert result == [
            CommonPrefix("img_", None, 3, ["img_1.txt", "img_2.txt", "img_3.txt"])
        ]

    def test_delimiter_groups_take_precedence(self, make_files):
        """Free-form prefixes covered by a delimiter group are dropped."""
        directory = make_files(
            [
                "[PROJECT]_doc1.txt",
                "[PROJECT]_doc2.txt",
                "[PROJECT]_doc3.txt",
                "test_file_001.txt",
                "test_file_002.txt",
                "other.txt",
            ]
        )

        result = find_common_prefix(directory, PrefixOptions.default())

        assert result == [
            CommonPrefix(
                "PROJECT",
                ("[", "]"),
                3,
                ["[PROJECT]_doc1.txt", "[PROJECT]_doc2.txt", "[PROJECT]_doc3.txt"],
            ),
            CommonPrefix("test_file_00", None, 2, ["test_file_001.txt", "test_file_002.txt"]),
        ]

    def test_quote_tail_candidates_dropped(self, make_files):
        """Free-form prefixes ending in a quote character never survive."""
        directory = make_files(['a"b.txt', 'a"c.txt'])

        assert find_common_prefix(directory, PrefixOptions.default()) == []

    def test_ties_are_ordered_by_prefix(self, make_files):
        """Equal counts sort by prefix text."""
        directory = make_files(["b_1.txt", "b_2.txt", "a_1.txt", "a_2.txt"])
        options = PrefixOptions(mode=DetectAll(delimiters=()), min_occurrences=2)

        assert _prefixes(find_common_prefix(directory, options)) == [("a_", None), ("b_", None)]

    def test_delimited_before_free_form_at_equal_count(self, make_files):
        """At equal counts delimiter groups come first."""
        directory = make_files(["[T] a.txt", "[T] b.txt", "IMG_1.jpg", "IMG_2.jpg"])

        result = find_common_prefix(directory, PrefixOptions.default())

        assert _prefixes(result) == [("T", ("[", "]")), ("IMG_", None)]

    def test_result_is_reproducible(self, make_files):
        """Two scans of the same directory agree exactly."""
        directory = make_files(
            ["IMG_2024_01.jpg", "IMG_2024_02.jpg", "IMG_2023_01.jpg", "(draft) a.txt", "(draft) b.txt"]
        )
        options = PrefixOptions.default()

        assert find_common_prefix(directory, options) == find_common_prefix(directory, options)


class TestInvariants:
    """Properties that hold for every returned group."""

    @pytest.mark.parametrize("min_occurrences", [0, 1, 2, 3])
    def test_occurrences_match_unique_files(self, make_files, min_occurrences):
        """occurrences == len(files) >= k and files has no duplicates."""
        directory = make_files(
            [
                "[Band] 01 - Intro.mp3",
                "[Band] 02 - Song.mp3",
                "[Band] 03 - Outro.mp3",
                "IMG_2024_0001.jpg",
                "IMG_2024_0002.jpg",
                "IMG_2023_0001.jpg",
                "report-final-v1.docx",
                "report-final-v2.docx",
                "notes.txt",
            ]
        )
        options = PrefixOptions(mode=DetectAll(), min_occurrences=min_occurrences)

        for group in find_common_prefix(directory, options):
            assert group.occurrences == len(group.files)
            assert group.occurrences >= min_occurrences
            assert len(set(group.files)) == len(group.files)

    def test_sorted_by_occurrences(self, make_files):
        """Results never increase in occurrence count."""
        directory = make_files(["ab_1.txt", "ab_2.txt", "ab_3.txt", "cd_1.txt", "cd_2.txt"])

        counts = [g.occurrences for g in find_common_prefix(directory, PrefixOptions.default())]

        assert counts == sorted(counts, reverse=True)


class TestDirectoryHandling:
    """Directory-level errors and listing rules."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryNotFoundError):
            find_common_prefix(tmp_path / "missing", PrefixOptions.default())

    def test_not_a_directory(self, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        with pytest.raises(NotADirectoryPathError) as exc_info:
            find_common_prefix(file_path, PrefixOptions.default())
        assert isinstance(exc_info.value, PrefixScanError)
        assert exc_info.value.directory == file_path

    def test_subdirectories_are_ignored(self, make_files):
        """Only regular files directly inside the directory are scanned."""
        directory = make_files(["IMG_1.jpg"])
        (directory / "IMG_dir").mkdir()
        (directory / "IMG_dir" / "IMG_2.jpg").write_text("x")

        assert list_directory_files(directory) == ["IMG_1.jpg"]
        assert find_common_prefix(directory, PrefixOptions.default()) == []

    def test_empty_directory(self, make_files):
        assert find_common_prefix(make_files([]), PrefixOptions.default()) == []
