"""
conftest.py — pytest fixtures shared across the test suite.

Provides an in-memory filesystem that can be told to reject long names,
lose create races, or fail outright, so resolver tests stay independent of
the host filesystem's real limits.
"""

from __future__ import annotations

import io
import os

import pytest

from artifactpath.resolver.budget import SafeLengthBudget
from artifactpath.utils.exceptions import NameTooLongError, PathConflictError
from artifactpath.utils.logging import Logger


class FakeFileManager:
    """Dict-backed stand-in for FileManager."""

    def __init__(self, max_name_bytes: int | None = None, fail_with: Exception | None = None) -> None:
        self.max_name_bytes = max_name_bytes
        self.fail_with = fail_with
        self.files: dict[str, bytes] = {}
        self.hidden: set[str] = set()
        self.create_attempts: list[str] = []

    def add(self, path: str, data: bytes = b"") -> None:
        self.files[path] = data

    def exists(self, path: str) -> bool:
        return path in self.files and path not in self.hidden

    def create_empty(self, path: str, exclusive: bool = False) -> None:
        self.create_attempts.append(path)
        if self.fail_with is not None:
            raise self.fail_with
        name = os.path.basename(path)
        if self.max_name_bytes is not None and len(os.fsencode(name)) > self.max_name_bytes:
            raise NameTooLongError(f"Filename too long: {path}", path)
        if exclusive and path in self.files:
            raise PathConflictError(f"Path already exists: {path}", path)
        self.files[path] = b""


# =========================================================================
# Fixtures
# =========================================================================

@pytest.fixture
def fake_fs() -> FakeFileManager:
    return FakeFileManager()


@pytest.fixture
def budget() -> SafeLengthBudget:
    """Fresh default budget: 254 bytes, 64-byte floor."""
    return SafeLengthBudget()


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream) -> Logger:
    """Verbose, uncolored logger writing into log_stream."""
    return Logger(verbose=True, color=False, stream=log_stream)


@pytest.fixture
def make_fs():
    """Factory for FakeFileManager with custom limits or failures."""
    return FakeFileManager
