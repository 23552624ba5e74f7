"""Tests for whole-file read, write, append and remove helpers."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

import pytest

from fsguard.core.errors import ErrorKind, FileTooLargeError, NotFileError
from fsguard.core.files import append_file, read_file, remove_file, write_file
from fsguard.core.events import FsEvent

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")


def _mode(path: Path) -> int:
    return stat.S_IMODE(os.stat(path).st_mode)


def test_write_then_read_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "data.bin"
    payload = bytes(range(256)) * 4

    write_file(target, payload, 0o644)

    assert read_file(target) == payload
    assert read_file(target, 0) == payload
    assert read_file(target, -5) == payload


def test_write_empty_data_truncates(tmp_path: Path) -> None:
    target = tmp_path / "data.bin"
    write_file(target, b"something", 0o644)

    write_file(target, b"", 0o644)

    assert read_file(target) == b""


@posix_only
def test_overwrite_replaces_content_and_mode(tmp_path: Path) -> None:
    target = tmp_path / "config"

    write_file(target, b"first version", 0o644)
    write_file(target, b"second", 0o600)

    assert read_file(target) == b"second"
    assert _mode(target) == 0o600


@posix_only
def test_write_applies_mode_verbatim_despite_umask(tmp_path: Path) -> None:
    target = tmp_path / "shared"
    previous = os.umask(0o077)
    try:
        write_file(target, b"x", 0o664)
    finally:
        _ = os.umask(previous)

    assert _mode(target) == 0o664


def test_write_into_missing_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        write_file(tmp_path / "missing" / "a.txt", b"x", 0o644)


@posix_only
def test_append_accumulates_and_keeps_first_mode(tmp_path: Path) -> None:
    target = tmp_path / "log.txt"

    append_file(target, b"one,", 0o640)
    append_file(target, b"two", 0o644)

    assert read_file(target) == b"one,two"
    assert _mode(target) == 0o640


@posix_only
def test_append_to_existing_file_preserves_permissions(tmp_path: Path) -> None:
    target = tmp_path / "secret"
    write_file(target, b"a", 0o600)

    append_file(target, b"b", 0o666)

    assert read_file(target) == b"ab"
    assert _mode(target) == 0o600


@posix_only
def test_append_through_dangling_symlink_creates_target(tmp_path: Path) -> None:
    target = tmp_path / "target.log"
    link = tmp_path / "link.log"
    link.symlink_to(target)

    append_file(link, b"x", 0o640)
    append_file(link, b"y", 0o600)

    assert read_file(target) == b"xy"
    assert link.is_symlink()
    assert _mode(target) == 0o640


def test_append_into_missing_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        append_file(tmp_path / "missing" / "a.txt", b"x", 0o644)


def test_read_rejects_file_larger_than_ceiling(tmp_path: Path) -> None:
    target = tmp_path / "big"
    write_file(target, b"x" * 11, 0o644)

    with pytest.raises(FileTooLargeError) as excinfo:
        _ = read_file(target, 10)

    assert excinfo.value.kind is ErrorKind.FILE_TOO_LARGE
    assert excinfo.value.size == 11
    assert excinfo.value.limit == 10
    assert excinfo.value.path == str(target)


def test_read_accepts_file_equal_to_ceiling(tmp_path: Path) -> None:
    target = tmp_path / "exact"
    write_file(target, b"x" * 10, 0o644)

    assert read_file(target, 10) == b"x" * 10


def test_bounded_read_of_directory_is_not_a_file(tmp_path: Path) -> None:
    with pytest.raises(NotFileError) as excinfo:
        _ = read_file(tmp_path, 10)

    assert excinfo.value.kind is ErrorKind.NOT_A_FILE


def test_bounded_read_of_missing_file_passes_stat_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = read_file(tmp_path / "missing", 10)


def test_unbounded_read_of_missing_file_passes_open_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = read_file(tmp_path / "missing")


@posix_only
def test_write_onto_directory_passes_platform_error(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        write_file(tmp_path, b"x", 0o644)

    assert tmp_path.is_dir()


@posix_only
def test_unbounded_read_of_directory_passes_platform_error(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        _ = read_file(tmp_path)
    with pytest.raises(IsADirectoryError):
        _ = read_file(tmp_path, -1)


def test_remove_file_deletes_regular_file(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    write_file(target, b"a", 0o644)

    remove_file(target)

    assert not target.exists()
    assert tmp_path.exists()


def test_remove_file_rejects_directory_without_deleting(tmp_path: Path) -> None:
    directory = tmp_path / "d"
    directory.mkdir()

    with pytest.raises(NotFileError):
        remove_file(directory)

    assert directory.is_dir()


def test_remove_file_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(NotFileError):
        remove_file(tmp_path / "missing", prune_parent=True)

    assert tmp_path.exists()


def test_remove_file_prunes_parent_that_becomes_empty(tmp_path: Path) -> None:
    parent = tmp_path / "album"
    parent.mkdir()
    target = parent / "track.txt"
    write_file(target, b"x", 0o644)

    remove_file(target, prune_parent=True)

    assert not parent.exists()
    assert tmp_path.exists()


def test_remove_file_keeps_non_empty_parent(tmp_path: Path) -> None:
    parent = tmp_path / "album"
    parent.mkdir()
    write_file(parent / "one.txt", b"1", 0o644)
    write_file(parent / "two.txt", b"2", 0o644)

    remove_file(parent / "one.txt", prune_parent=True)

    assert parent.is_dir()
    assert [p.name for p in parent.iterdir()] == ["two.txt"]


def test_remove_file_prunes_parent_of_relative_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    parent = tmp_path / "work"
    parent.mkdir()
    write_file(parent / "a.txt", b"a", 0o644)
    monkeypatch.chdir(parent)

    remove_file("a.txt", prune_parent=True)

    assert not parent.exists()


def test_mutations_emit_fs_events(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fsguard")
    target = tmp_path / "a.txt"

    write_file(target, b"a", 0o644)
    append_file(target, b"b", 0o644)
    remove_file(target)

    records = [record for record in caplog.records if record.name == "fsguard"]
    events = [getattr(record, "fs_event", None) for record in records]
    assert events == [FsEvent.FILE_WRITE, FsEvent.FILE_APPEND, FsEvent.FILE_REMOVE]
    assert all(record.levelno == logging.DEBUG for record in records)
