"""
Module: conftest.py

Author: Michael Economou
Date: 2026-02-08

Global pytest configuration and fixtures for the ftmi test suite.
"""

import os
import sys

# Add project root to sys.path so 'ftmi' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from ftmi.core.rename.ledger import RenameLedger
from ftmi.utils.paths import AppPaths


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the per-user data directory at a throwaway location."""
    data_dir = tmp_path / "ftmi-data"
    monkeypatch.setenv("FTMI_DATA_DIR", str(data_dir))
    AppPaths.reset()
    yield data_dir
    AppPaths.reset()


@pytest.fixture
def make_files(tmp_path):
    """Create empty files in a directory and return the directory path."""

    def _make(names, dirname="files"):
        directory = tmp_path / dirname
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_text(name, encoding="utf-8")
        return directory

    return _make


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "ledger" / "renames.db"


@pytest.fixture
def ledger(ledger_path):
    """Fresh RenameLedger on a per-test database."""
    with RenameLedger(ledger_path) as rename_ledger:
        yield rename_ledger
