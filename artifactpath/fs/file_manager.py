"""
High-level file operations facade.

Resolution itself only needs exists() and create_empty(). The read, write,
remove and copy primitives are for the artifact-writing caller that fills
in the reserved path, so its errors share the same taxonomy.
"""

from __future__ import annotations

import errno
import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from artifactpath.utils.exceptions import (
    ArtifactIOError,
    NameTooLongError,
    PathConflictError,
)
from artifactpath.utils.logging import Logger

# ERROR_FILENAME_EXCED_RANGE
_WINERROR_NAME_TOO_LONG = 206


def classify_os_error(exc: OSError, path: str) -> ArtifactIOError:
    """Map an OSError onto the artifactpath error taxonomy."""
    reason = exc.strerror or str(exc)
    if exc.errno == errno.ENAMETOOLONG or getattr(exc, "winerror", None) == _WINERROR_NAME_TOO_LONG:
        return NameTooLongError(f"Filename too long: {path}", path)
    return ArtifactIOError(f"{reason}: {path}", path)


@contextmanager
def _translate_errors(path: str) -> Iterator[None]:
    try:
        yield
    except OSError as e:
        raise classify_os_error(e, path) from e


class FileManager:
    """Facade for the file system operations artifact resolution relies on."""

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger or Logger()

    def exists(self, path: str | Path) -> bool:
        # An over-long name reports False here; the create step surfaces the error
        return os.path.exists(path)

    def create_empty(self, path: str | Path, exclusive: bool = False) -> None:
        """
        Create a zero-byte file at path, creating parent directories.
        With exclusive=True an existing file raises PathConflictError
        instead of being truncated.
        """
        path = os.fspath(path)
        parent = os.path.dirname(path)
        if parent:
            with _translate_errors(parent):
                os.makedirs(parent, exist_ok=True)

        flags = os.O_WRONLY | os.O_CREAT | (os.O_EXCL if exclusive else os.O_TRUNC)
        try:
            fd = os.open(path, flags, 0o666)
        except FileExistsError as e:
            if exclusive:
                raise PathConflictError(f"Path already exists: {path}", path) from e
            raise classify_os_error(e, path) from e
        except OSError as e:
            raise classify_os_error(e, path) from e
        os.close(fd)
        self.logger.debug("FS", f"Reserved {path}")

    def read_bytes(self, path: str | Path) -> bytes:
        path = os.fspath(path)
        with _translate_errors(path):
            return Path(path).read_bytes()

    def write_bytes(self, path: str | Path, data: bytes) -> None:
        """Write data to path, creating parent directories."""
        path = os.fspath(path)
        with _translate_errors(path):
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_bytes(data)
        self.logger.debug("FS", f"Wrote {path} ({len(data)} bytes)")

    def remove(self, path: str | Path) -> None:
        """Remove a file or directory tree. A missing path is not an error."""
        path = os.fspath(path)
        with _translate_errors(path):
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)

    def copy(self, src: str | Path, dst: str | Path) -> None:
        """Copy a file, creating the destination's parent directories."""
        src, dst = os.fspath(src), os.fspath(dst)
        with _translate_errors(dst):
            Path(dst).parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dst)
        self.logger.debug("FS", f"Copied {src} -> {dst}")
