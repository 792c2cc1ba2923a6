"""
Tests for size formatting and path expansion helpers.
"""

import os

import pytest

from dirarchive.core import paths
from dirarchive.core.utils import format_file_size, pluralize_directories


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 B"),
    (1, "1 B"),
    (1023, "1023 B"),
    (1024, "1.0 KB"),
    (1536, "1.5 KB"),
    (1024 * 1024, "1.0 MB"),
    (5 * 1024 ** 3 + 1024 ** 3 // 2, "5.5 GB"),
    (3 * 1024 ** 4, "3.0 TB"),
    (2048 * 1024 ** 4, "2048.0 TB"),
])
def test_format_file_size(num_bytes, expected):
    assert format_file_size(num_bytes) == expected


def test_pluralize_directories():
    assert pluralize_directories(1) == "directory"
    assert pluralize_directories(0) == "directories"
    assert pluralize_directories(3) == "directories"


def test_expand_path_tilde_on_posix(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Linux")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert paths.expand_path("~/archives") == os.path.join(str(tmp_path), "archives")


def test_expand_path_tilde_on_windows(monkeypatch):
    monkeypatch.setattr(paths.platform, "system", lambda: "Windows")
    monkeypatch.setenv("USERPROFILE", "/profiles/someone")
    assert paths.expand_path("~/Backups") == os.path.normpath("/profiles/someone/Backups")


def test_expand_path_makes_relative_paths_absolute(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert paths.expand_path("data/../projects") == os.path.join(str(tmp_path), "projects")


def test_expand_path_does_not_check_existence(tmp_path):
    missing = tmp_path / "nowhere" / "at" / "all"
    assert paths.expand_path(str(missing)) == str(missing)


def test_same_directory(tmp_path):
    (tmp_path / "a").mkdir()
    assert paths.same_directory(str(tmp_path / "a"), str(tmp_path / "a" / "."))
    assert not paths.same_directory(str(tmp_path / "a"), str(tmp_path))
