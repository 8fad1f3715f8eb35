"""Unit tests for the filesystem primitives."""

import errno
import logging
from pathlib import Path

import pytest

from ephemeral.exceptions import IOFailureError, PathConflictError, PermissionDeniedError
from ephemeral.io.filesystem import make_dirs, remove_tree, write_file


def test_make_dirs_creates_ancestors(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    make_dirs(target)
    assert target.is_dir()


def test_make_dirs_is_idempotent(tmp_path):
    target = tmp_path / "a"
    make_dirs(target)
    (target / "keep").write_bytes(b"x")
    make_dirs(target)
    assert (target / "keep").read_bytes() == b"x"


def test_make_dirs_conflicts_with_file(tmp_path):
    target = tmp_path / "taken"
    target.write_bytes(b"")
    with pytest.raises(PathConflictError) as exc_info:
        make_dirs(target)
    assert exc_info.value.path == str(target)
    assert isinstance(exc_info.value.__cause__, FileExistsError)


def test_make_dirs_conflicts_with_file_ancestor(tmp_path):
    (tmp_path / "taken").write_bytes(b"")
    with pytest.raises(PathConflictError):
        make_dirs(tmp_path / "taken" / "sub")


def test_make_dirs_permission_denied(tmp_path, monkeypatch):
    def deny(self, *args, **kwargs):
        raise PermissionError(errno.EACCES, "Permission denied", str(self))

    monkeypatch.setattr(Path, "mkdir", deny)
    with pytest.raises(PermissionDeniedError):
        make_dirs(tmp_path / "nope")


def test_write_file_exact_bytes(tmp_path):
    target = tmp_path / "blob"
    content = bytes(range(256))
    write_file(target, content)
    assert target.read_bytes() == content


def test_write_file_truncates(tmp_path):
    target = tmp_path / "blob"
    target.write_bytes(b"a much longer previous content")
    write_file(target, b"e")
    assert target.read_bytes() == b"e"


def test_write_file_conflicts_with_directory(tmp_path):
    (tmp_path / "dir").mkdir()
    with pytest.raises(PathConflictError):
        write_file(tmp_path / "dir", b"x")


def test_write_file_missing_parent(tmp_path):
    with pytest.raises(IOFailureError) as exc_info:
        write_file(tmp_path / "missing" / "file", b"x")
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_remove_tree(tmp_path):
    root = tmp_path / "root"
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "b" / "f").write_bytes(b"x")
    (root / "g").write_bytes(b"y")

    assert remove_tree(root) is True
    assert not root.exists()


def test_remove_tree_missing_path(tmp_path):
    assert remove_tree(tmp_path / "never-created") is False


def test_remove_tree_on_file_conflicts(tmp_path):
    target = tmp_path / "file"
    target.write_bytes(b"")
    with pytest.raises(PathConflictError):
        remove_tree(target)
    assert target.exists()


def test_debug_logging(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="ephemeral"):
        make_dirs(tmp_path / "d")
        write_file(tmp_path / "d" / "f", b"abc")
        remove_tree(tmp_path / "d")

    messages = [record.getMessage() for record in caplog.records]
    assert f"Created directory {tmp_path / 'd'}" in messages
    assert f"Wrote 3 bytes to {tmp_path / 'd' / 'f'}" in messages
    assert f"Removed tree {tmp_path / 'd'}" in messages
