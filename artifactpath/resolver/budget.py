"""Filename length budget shared by every resolution in a run."""

from __future__ import annotations

import os
from typing import Mapping

from artifactpath.utils.exceptions import ConfigError

# Many filesystems cap filenames at 255 bytes; 254 leaves room for the
# smallest common denominator. The budget only shrinks from here, one byte
# per ENAMETOOLONG, and never below MIN_PREFIX_BYTES of name prefix.
# @see https://en.wikipedia.org/wiki/Comparison_of_file_systems#Limits
DEFAULT_MAX_SAFE_BYTES = 254
MIN_PREFIX_BYTES = 64
ENV_MAX_SAFE_BYTES = "ARTIFACTPATH_MAX_SAFE_FILENAME_BYTES"


def max_safe_bytes_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Read the initial budget, falling back to the default on bad input."""
    if environ is None:
        environ = os.environ
    raw = environ.get(ENV_MAX_SAFE_BYTES, "")
    try:
        value = int(raw.strip())
    except ValueError:
        return DEFAULT_MAX_SAFE_BYTES
    return value if value > 0 else DEFAULT_MAX_SAFE_BYTES


class SafeLengthBudget:
    """
    Current best-known maximum filename byte length.

    One instance is meant to live as long as the pipeline that owns it;
    every resolver sharing it benefits from limits discovered by the
    others. The value never increases.
    """

    def __init__(
        self,
        max_safe_bytes: int = DEFAULT_MAX_SAFE_BYTES,
        floor: int = MIN_PREFIX_BYTES,
    ) -> None:
        if floor < 1:
            raise ConfigError(f"Floor must be positive, got {floor}")
        if max_safe_bytes < 1:
            raise ConfigError(f"Budget must be positive, got {max_safe_bytes}")
        self._current = max_safe_bytes
        self.floor = floor

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        floor: int = MIN_PREFIX_BYTES,
    ) -> SafeLengthBudget:
        return cls(max_safe_bytes_from_env(environ), floor=floor)

    @property
    def current(self) -> int:
        return self._current

    def shrink(self) -> int:
        """Lower the budget by one byte and return the new value."""
        self._current -= 1
        return self._current

    def __repr__(self) -> str:
        return f"SafeLengthBudget(current={self._current}, floor={self.floor})"
