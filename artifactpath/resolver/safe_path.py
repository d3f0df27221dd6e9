"""Unique, length-safe artifact path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from artifactpath.fs.file_manager import FileManager
from artifactpath.resolver.budget import SafeLengthBudget
from artifactpath.utils.exceptions import NameTooLongError, PathConflictError
from artifactpath.utils.logging import Logger


def byte_length(text: str) -> int:
    return len(os.fsencode(text))


def duplicate_suffix(num: int, extension: str, overwrite: bool) -> str:
    """Build the ' (num).ext' tail; overwrite always targets the bare name."""
    marker = f" ({num})" if num > 0 and not overwrite else ""
    return f"{marker}.{extension}"


def truncate_basename(without_ext: str, max_bytes: int) -> str:
    """
    Cut the last path segment to at most max_bytes bytes.

    The cut is on raw bytes, so a multi-byte character may be split. On
    POSIX the dangling bytes survive as surrogate escapes and reach the
    filesystem unchanged.
    """
    parent, name = os.path.split(without_ext)
    encoded = os.fsencode(name)
    if len(encoded) <= max_bytes:
        return without_ext

    head = encoded[:max(max_bytes, 0)]
    try:
        truncated = os.fsdecode(head)
    except UnicodeDecodeError:
        # strict filesystem encoding (Windows); drop the partial character
        truncated = head.decode("utf-8", "ignore")
    return os.path.join(parent, truncated)


class SafePathResolver:
    """
    Resolves a path-without-extension into a reserved, collision-free file.

    Two counters drive the loop: the duplicate index, raised whenever the
    candidate is taken, and the shared length budget, lowered whenever the
    filesystem rejects the candidate as too long.
    """

    def __init__(
        self,
        budget: SafeLengthBudget,
        file_manager: FileManager | None = None,
        logger: Logger | None = None,
        *,
        exclusive_create: bool = True,
    ) -> None:
        self.budget = budget
        self.logger = logger or Logger()
        self.file_manager = file_manager or FileManager(self.logger)
        self.exclusive_create = exclusive_create

    def resolve(
        self,
        without_ext: str | Path,
        extension: str,
        overwrite: bool = False,
    ) -> str:
        """
        Return a path to a freshly created empty file for the artifact.

        When the basename is cut inside a multi-byte character, the
        returned str holds surrogate escapes for the dangling bytes. It
        round-trips through os.fsencode() to the exact on-disk name but
        fails a strict str.encode("utf-8").
        """
        without_ext = os.fspath(without_ext)
        num = 0

        while True:
            suffix = duplicate_suffix(num, extension, overwrite)
            max_prefix_bytes = self.budget.current - byte_length(suffix)
            full_path = truncate_basename(without_ext, max_prefix_bytes) + suffix

            found = self.file_manager.exists(full_path)
            if found and not overwrite:
                self.logger.debug("RESOLVE", f"Taken, trying next index: {full_path}")
                num += 1
                continue

            try:
                self.file_manager.create_empty(
                    full_path,
                    exclusive=self.exclusive_create and not overwrite,
                )
            except PathConflictError:
                # created by someone else since the existence check
                self.logger.debug("RESOLVE", f"Lost create race, trying next index: {full_path}")
                num += 1
                continue
            except NameTooLongError:
                if max_prefix_bytes < self.budget.floor:
                    self.logger.debug(
                        "RESOLVE",
                        f"Name still too long at {max_prefix_bytes} prefix bytes, giving up",
                    )
                    raise
                self.budget.shrink()
                self.logger.warn(
                    "RESOLVE",
                    f"Filename too long, lowering safe length to {self.budget.current} bytes",
                )
                continue

            self.logger.debug("RESOLVE", f"Resolved {full_path}")
            return full_path
