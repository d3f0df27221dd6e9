"""Safe filename sanitization and artifact name building."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

RUNNABLE_SEPARATOR = " -- "
FAILED_MARKER = " (failed)"
MAX_SEGMENT_BYTES = 255

PATH_SEPARATOR_RE = re.compile(r"[\\/]")

_ILLEGAL_RE = re.compile(r'[/\\?<>:*|"]')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED_RE = re.compile(r"^\.+$")
_WINDOWS_RESERVED_RE = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING_RE = re.compile(r"[. ]+$")


def _to_text(value: Any) -> str:
    """Coerce a title value of any type to text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    try:
        return str(value)
    except Exception:
        # broken __str__; fall back to the default object repr
        return object.__repr__(value)


def sanitize(value: Any) -> str:
    """
    Sanitize a single name segment for use as a filename.
    Unsafe characters are removed, never replaced, and the call never raises.
    """
    safe = _to_text(value)
    safe = _ILLEGAL_RE.sub("", safe)
    safe = _CONTROL_RE.sub("", safe)
    safe = _RESERVED_RE.sub("", safe)
    safe = _WINDOWS_RESERVED_RE.sub("", safe)
    safe = _WINDOWS_TRAILING_RE.sub("", safe)

    encoded = safe.encode("utf-8", "surrogatepass")
    if len(encoded) > MAX_SEGMENT_BYTES:
        # Drop a trailing partial character instead of splitting it
        safe = encoded[:MAX_SEGMENT_BYTES].decode("utf-8", "ignore")
    return safe


def split_segments(value: Any) -> list[str]:
    """Split a name on forward and backward slashes."""
    return PATH_SEPARATOR_RE.split(_to_text(value))


@dataclass(frozen=True)
class ArtifactRequest:
    """Test metadata an artifact is named after."""

    spec_name: str = ""
    name: str | None = None
    titles: Sequence[Any] = ()
    failed: bool = False
    attempt_index: int | None = None
    output_root: str | Path | None = None
    extension: str | None = None
    overwrite: bool | None = None


@dataclass(frozen=True)
class ArtifactName:
    """Sanitized directory segments plus the leaf name of an artifact."""

    dir_segments: tuple[str, ...]
    base_name: str

    def without_ext(self, root: str | Path) -> str:
        """Join root, directories and leaf name, skipping empty segments."""
        parts = [segment for segment in (*self.dir_segments, self.base_name) if segment]
        return os.path.join(os.fspath(root), *parts)


def build_artifact_name(request: ArtifactRequest) -> ArtifactName:
    """Turn test metadata into sanitized directory segments and a leaf name."""
    spec_segments = [sanitize(s) for s in split_segments(request.spec_name or "")]

    if request.name:
        names = [sanitize(s) for s in split_segments(request.name)]
    else:
        # titles collapse into a single leaf, never into directories
        names = [RUNNABLE_SEPARATOR.join(sanitize(t) for t in (request.titles or ()))]

    leaf = names[-1]
    if request.failed:
        leaf = f"{leaf}{FAILED_MARKER}"
    if request.attempt_index and request.attempt_index > 0:
        leaf = f"{leaf} (attempt {request.attempt_index + 1})"

    dir_segments = tuple(s for s in spec_segments + names[:-1] if s)
    return ArtifactName(dir_segments=dir_segments, base_name=leaf)
