"""Tests for FileManager against the real filesystem."""

from __future__ import annotations

import errno
import sys

import pytest

from artifactpath.fs.file_manager import FileManager, classify_os_error
from artifactpath.utils.exceptions import (
    ArtifactIOError,
    IOErrorKind,
    NameTooLongError,
    PathConflictError,
)


@pytest.fixture
def files(logger) -> FileManager:
    return FileManager(logger)


class TestClassifyOsError:

    def test_enametoolong(self):
        err = classify_os_error(OSError(errno.ENAMETOOLONG, "File name too long"), "/x")
        assert isinstance(err, NameTooLongError)
        assert err.kind is IOErrorKind.NAME_TOO_LONG
        assert err.path == "/x"

    @pytest.mark.parametrize("code", [errno.EACCES, errno.ENOSPC, errno.EROFS])
    def test_everything_else_is_other(self, code):
        err = classify_os_error(OSError(code, "nope"), "/x")
        assert not isinstance(err, NameTooLongError)
        assert err.kind is IOErrorKind.OTHER
        assert "nope" in str(err)


class TestCreateEmpty:

    def test_creates_parents_and_empty_file(self, files, tmp_path):
        target = tmp_path / "a" / "b" / "shot.png"
        files.create_empty(target)
        assert target.read_bytes() == b""

    def test_truncates_existing_file(self, files, tmp_path):
        target = tmp_path / "shot.png"
        target.write_bytes(b"old")
        files.create_empty(target)
        assert target.read_bytes() == b""

    def test_exclusive_conflict(self, files, tmp_path):
        target = tmp_path / "shot.png"
        target.write_bytes(b"old")
        with pytest.raises(PathConflictError):
            files.create_empty(target, exclusive=True)
        assert target.read_bytes() == b"old"

    @pytest.mark.skipif(sys.platform == "win32", reason="ENAMETOOLONG is POSIX")
    def test_long_name_is_classified(self, files, tmp_path):
        with pytest.raises(NameTooLongError) as excinfo:
            files.create_empty(tmp_path / ("x" * 1000 + ".png"))
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_parent_is_a_file(self, files, tmp_path):
        (tmp_path / "blocker").write_bytes(b"")
        with pytest.raises(ArtifactIOError) as excinfo:
            files.create_empty(tmp_path / "blocker" / "shot.png")
        assert excinfo.value.kind is IOErrorKind.OTHER


class TestPrimitives:

    def test_exists(self, files, tmp_path):
        assert not files.exists(tmp_path / "missing.png")
        files.create_empty(tmp_path / "here.png")
        assert files.exists(tmp_path / "here.png")

    def test_exists_on_overlong_name_is_false(self, files, tmp_path):
        assert files.exists(tmp_path / ("x" * 1000)) is False

    def test_write_read_copy_remove(self, files, tmp_path):
        src = tmp_path / "in" / "shot.png"
        dst = tmp_path / "out" / "copy.png"

        files.write_bytes(src, b"\x89PNG")
        files.copy(src, dst)
        assert files.read_bytes(dst) == b"\x89PNG"

        files.remove(tmp_path / "out")
        assert not dst.exists()
        files.remove(tmp_path / "out")

    def test_read_missing(self, files, tmp_path):
        with pytest.raises(ArtifactIOError) as excinfo:
            files.read_bytes(tmp_path / "missing.png")
        assert excinfo.value.kind is IOErrorKind.OTHER
