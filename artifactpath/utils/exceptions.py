"""Exception hierarchy for artifactpath."""

from __future__ import annotations

from enum import Enum


class IOErrorKind(str, Enum):
    """Classification of a failed filesystem operation."""

    NAME_TOO_LONG = "NAME_TOO_LONG"
    OTHER = "OTHER"


class ArtifactPathError(Exception):
    """Base exception for all artifactpath errors."""


class ConfigError(ArtifactPathError):
    """Invalid length budget or floor configuration."""


class ArtifactIOError(ArtifactPathError):
    """A filesystem operation on an artifact path failed."""

    kind = IOErrorKind.OTHER

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class NameTooLongError(ArtifactIOError):
    """The filesystem rejected a filename as too long."""

    kind = IOErrorKind.NAME_TOO_LONG


class PathConflictError(ArtifactIOError):
    """Exclusive create found the path already taken."""
