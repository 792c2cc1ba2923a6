"""
Tests for source and output directory validation.
"""

import os
import stat

import pytest

from dirarchive.archive.validation import ValidationError, prepare_output, validate_source

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


def test_validate_source_accepts_directory(tmp_path):
    assert validate_source(str(tmp_path)) == tmp_path


def test_validate_source_missing(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(ValidationError) as exc_info:
        validate_source(str(missing))
    assert exc_info.value.message == f"Source directory '{missing}' does not exist or is not accessible."


def test_validate_source_not_a_directory(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("hello", encoding="utf-8")
    with pytest.raises(ValidationError) as exc_info:
        validate_source(str(file_path))
    assert "is not a directory" in exc_info.value.message
    assert str(file_path) in exc_info.value.message


@pytest.mark.skipif(running_as_root or os.name == "nt", reason="permission bits not enforced")
def test_validate_source_unreadable(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        with pytest.raises(ValidationError) as exc_info:
            validate_source(str(locked))
        assert "Permission denied" in exc_info.value.message
    finally:
        locked.chmod(stat.S_IRWXU)


def test_prepare_output_existing(tmp_path):
    output, created = prepare_output(str(tmp_path))
    assert output == tmp_path
    assert created is False


def test_prepare_output_creates_with_parents(tmp_path):
    target = tmp_path / "deep" / "nested" / "out"
    announced = []

    output, created = prepare_output(str(target), on_create=announced.append)

    assert created is True
    assert output.is_dir()
    assert announced == [str(target)]


def test_prepare_output_creation_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    target = blocker / "out"

    with pytest.raises(ValidationError) as exc_info:
        prepare_output(str(target))
    assert exc_info.value.message.startswith(f"Failed to create output directory '{target}'")


def test_prepare_output_rejects_file(tmp_path):
    file_path = tmp_path / "out.tar"
    file_path.write_bytes(b"")
    with pytest.raises(ValidationError):
        prepare_output(str(file_path))


@pytest.mark.skipif(running_as_root or os.name == "nt", reason="permission bits not enforced")
def test_prepare_output_not_writable(tmp_path):
    read_only = tmp_path / "read_only"
    read_only.mkdir()
    read_only.chmod(stat.S_IRUSR | stat.S_IXUSR)
    try:
        with pytest.raises(ValidationError) as exc_info:
            prepare_output(str(read_only))
        assert exc_info.value.message == f"Cannot write to output directory '{read_only}'. Permission denied."
    finally:
        read_only.chmod(stat.S_IRWXU)
