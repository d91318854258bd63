"""Tests for file I/O helpers."""

from __future__ import annotations

import stat

import pytest

from issuekit.core.errors import FilesystemError
from issuekit.filesystem import copy_file, mkdir, read_file, write_private


def _mode(path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_read_file(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("hello\n", encoding="utf-8")

    assert read_file(target) == "hello\n"


def test_read_missing_file_raises(tmp_path, caplog):
    missing = tmp_path / "nope.txt"

    with pytest.raises(FilesystemError) as excinfo:
        read_file(missing)

    assert excinfo.value.path == missing
    assert "Failed to read file" in caplog.text


def test_copy_file(tmp_path):
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    src.write_bytes(b"\x00\x01payload")
    dst.write_bytes(b"old content that is longer")

    copy_file(src, dst)

    assert dst.read_bytes() == b"\x00\x01payload"


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FilesystemError):
        copy_file(tmp_path / "missing", tmp_path / "dst")


def test_mkdir_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c"

    mkdir(target)

    assert target.is_dir()


def test_mkdir_existing_directory_is_noop(tmp_path):
    mkdir(tmp_path)

    assert tmp_path.is_dir()


def test_mkdir_over_file_raises(tmp_path, caplog):
    target = tmp_path / "file"
    target.write_text("x")

    with pytest.raises(FilesystemError, match="exists and is not a directory"):
        mkdir(target)
    assert "exists and is not a directory" in caplog.text


def test_write_private_is_owner_only(tmp_path):
    target = tmp_path / "secret.json"

    write_private(target, "{}\n")

    assert target.read_text() == "{}\n"
    assert _mode(target) == 0o600


def test_write_private_truncates_existing(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("a much longer previous body")

    write_private(target, b"short")

    assert target.read_bytes() == b"short"


def test_write_private_missing_directory_raises(tmp_path):
    with pytest.raises(FilesystemError):
        write_private(tmp_path / "missing" / "out.txt", "x")
    assert not (tmp_path / "missing").exists()
