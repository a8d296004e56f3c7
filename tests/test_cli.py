"""
Module: test_cli.py

Author: Michael Economou
Date: 2026-02-08

End-to-end tests for the ftmi command line.
"""

import argparse
import io

import pytest

from ftmi import cli
from ftmi.core.rename import RenameLedger

ALBUM = ["[Live] one.mp3", "[Live] two.mp3", "[Live] three.mp3", "cover.jpg"]


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from installing handlers on the test process' root logger."""
    monkeypatch.setattr(cli, "_configure_logging", lambda verbose: None)


@pytest.fixture
def run(ledger_path, capsys):
    def _run(*argv):
        status = cli.main(["--db", str(ledger_path), *argv])
        captured = capsys.readouterr()
        return status, captured.out, captured.err

    return _run


class TestParser:
    def test_delimiter_pair(self):
        assert cli.delimiter_pair("[]") == ("[", "]")
        assert cli.delimiter_pair("<<,>>") == ("<<", ">>")

    @pytest.mark.parametrize("value", ["[", "abc", ",]"])
    def test_bad_delimiter_pair(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.delimiter_pair(value)

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestDetect:
    def test_lists_groups(self, run, make_files):
        directory = make_files(ALBUM)
        status, out, _ = run("detect", str(directory))

        assert status == 0
        assert "[Live]  (3 files)" in out
        assert "[Live] two.mp3" in out

    def test_specific_prefixes(self, run, make_files):
        directory = make_files(["IMG_1.jpg", "IMG_2.jpg", "DOC_1.pdf"])
        status, out, _ = run("detect", str(directory), "--prefix", "IMG_", "--prefix", "DOC_")

        assert status == 0
        assert "IMG_  (2 files)" in out
        assert "DOC_" not in out

    def test_missing_directory(self, run, tmp_path):
        status, out, err = run("detect", str(tmp_path / "missing"))

        assert status == 1
        assert "Warning:" in err

    def test_nothing_found(self, run, make_files):
        directory = make_files(["alpha.txt", "beta.txt"])
        status, out, _ = run("detect", str(directory), "--min", "3")

        assert status == 0
        assert "No common prefixes found" in out

    def test_directories_from_stdin(self, run, make_files, monkeypatch):
        album = make_files(ALBUM, dirname="album")
        photos = make_files(["IMG_1.jpg", "IMG_2.jpg"], dirname="photos")
        monkeypatch.setattr("sys.stdin", io.StringIO(f"  {album}  \n\n{photos}\n"))

        status, out, _ = run("detect")

        assert status == 0
        assert f"Directory: {album}" in out
        assert f"Directory: {photos}" in out
        assert "[Live]  (3 files)" in out
        assert "IMG_  (2 files)" in out

    def test_empty_stdin_scans_nothing(self, run, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("\n   \n"))

        status, out, _ = run("longest")

        assert status == 0
        assert out == ""


class TestLongest:
    def test_winner(self, run, make_files):
        directory = make_files(ALBUM)
        status, out, _ = run("longest", str(directory))

        assert status == 0
        assert "Prefix 1: [Live]  (3 files)" in out

    def test_filter_fallback_noted(self, run, make_files):
        directory = make_files(["IMG_1.jpg", "IMG_2.jpg"])
        status, out, _ = run("longest", str(directory))

        assert status == 0
        assert "matched nothing" in out

    def test_invalid_pattern_warns(self, run, make_files):
        directory = make_files(ALBUM)
        status, _, err = run("longest", str(directory), "--regex", "[")

        assert status == 0
        assert "invalid filter pattern" in err

    def test_missing_directory_does_not_stop_the_rest(self, run, make_files, tmp_path):
        directory = make_files(ALBUM)
        status, out, err = run("longest", str(tmp_path / "missing"), str(directory))

        assert status == 1
        assert "Warning:" in err
        assert "Prefix 1: [Live]  (3 files)" in out


class TestRemove:
    def test_preview_changes_nothing(self, run, make_files, ledger_path):
        directory = make_files(ALBUM)
        status, out, _ = run("remove", str(directory))

        assert status == 0
        assert "[Live] one.mp3 -> one.mp3" in out
        assert "preview" in out
        assert sorted(p.name for p in directory.iterdir()) == sorted(ALBUM)
        assert not ledger_path.exists()

    def test_execute_then_undo(self, run, make_files):
        directory = make_files(ALBUM)

        status, out, _ = run("remove", str(directory), "--execute")
        assert status == 0
        assert "3 renamed" in out
        assert sorted(p.name for p in directory.iterdir()) == [
            "cover.jpg",
            "one.mp3",
            "three.mp3",
            "two.mp3",
        ]

        status, out, _ = run("history")
        assert status == 0
        assert "Renamed 3 file(s)" in out

        status, out, _ = run("undo")
        assert status == 0
        assert "3 restored, 0 failed" in out
        assert sorted(p.name for p in directory.iterdir()) == sorted(ALBUM)

        status, out, _ = run("undo")
        assert status == 1
        assert "0 restored, 3 failed" in out


class TestLedgerCommands:
    def test_empty_history(self, run):
        status, out, _ = run("history")
        assert status == 0
        assert "No rename operations recorded" in out

    def test_undo_nothing(self, run):
        status, out, _ = run("undo")
        assert status == 0
        assert "No rename operations to undo" in out

    def test_undo_unknown_operation(self, run):
        status, _, err = run("undo", "op_missing")
        assert status == 1
        assert "op_missing" in err

    def test_cleanup(self, run, ledger_path, tmp_path):
        with RenameLedger(ledger_path) as ledger:
            ledger.record_rename(tmp_path / "a", tmp_path / "b", tmp_path, "x", "op_1")

        status, out, _ = run("cleanup", "--days", "0")
        assert status == 0
        assert "Deleted 1 records" in out

    def test_cleanup_huge_retention(self, run, ledger_path, tmp_path):
        with RenameLedger(ledger_path) as ledger:
            ledger.record_rename(tmp_path / "a", tmp_path / "b", tmp_path, "x", "op_1")

        status, out, _ = run("cleanup", "--days", "1000000")
        assert status == 0
        assert "Deleted 0 records" in out

    def test_recover(self, run, ledger_path, tmp_path):
        (tmp_path / "b").write_text("", encoding="utf-8")
        with RenameLedger(ledger_path) as ledger:
            ledger.begin_rename(tmp_path / "a", tmp_path / "b", tmp_path, "x", "op_1")

        status, out, _ = run("recover")
        assert status == 0
        assert "1 committed, 0 discarded" in out

    def test_unwritable_ledger(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        status = cli.main(["--db", str(blocker / "renames.db"), "history"])

        assert status == 1
        assert "Error:" in capsys.readouterr().err


def test_extract_paths(run, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("see /var/log/app.log and ./src/main.py now"))
    status, out, _ = run("extract-paths")

    assert status == 0
    assert out.splitlines() == ["./src/main.py", "/var/log/app.log"]
