"""
Shared fixtures for the dirarchive test suite.
"""

import shutil
from pathlib import Path
from typing import List, Tuple

import pytest

from dirarchive.archive.tar_runner import CommandResult
from dirarchive.core.config import get_settings

requires_tar = pytest.mark.skipif(shutil.which("tar") is None, reason="tar executable not available")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Make sure no DIRARCHIVE_* environment leaks into a test."""
    for name in ("DIRARCHIVE_TAR_PATH", "DIRARCHIVE_LIST_LIMIT", "DIRARCHIVE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeRunner:
    """Stands in for TarRunner; writes a small file instead of calling tar."""

    def __init__(self, fail_on: Tuple[str, ...] = (), payload: bytes = b"x" * 2048):
        self.fail_on = fail_on
        self.payload = payload
        self.calls: List[Tuple[Path, Path, str]] = []

    def create(self, output_file, source_dir, entry_name):
        self.calls.append((Path(output_file), Path(source_dir), entry_name))
        if entry_name in self.fail_on:
            # Simulate tar leaving a truncated archive behind
            Path(output_file).write_bytes(b"partial")
            return CommandResult(returncode=2, stderr="tar: simulated failure")
        Path(output_file).write_bytes(self.payload)
        return CommandResult(returncode=0)


@pytest.fixture
def source_tree(tmp_path) -> Path:
    """Source directory with three subdirectories, a file and a hidden directory."""
    source = tmp_path / "source"
    for name in ("photos", "docs", "2024"):
        (source / name).mkdir(parents=True)
        (source / name / "readme.txt").write_text(f"contents of {name}\n", encoding="utf-8")
    (source / "notes.txt").write_text("not a directory\n", encoding="utf-8")
    (source / ".cache").mkdir()
    return source
