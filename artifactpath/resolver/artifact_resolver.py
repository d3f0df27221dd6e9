"""Artifact path pipeline: test metadata in, reserved output path out."""

from __future__ import annotations

from pathlib import Path

from artifactpath.fs.file_manager import FileManager
from artifactpath.fs.path_generator import ArtifactRequest, build_artifact_name
from artifactpath.resolver.budget import SafeLengthBudget
from artifactpath.resolver.safe_path import SafePathResolver
from artifactpath.utils.exceptions import ArtifactPathError
from artifactpath.utils.logging import Logger


class ArtifactPathResolver:
    """Orchestrates naming and safe resolution with one shared length budget."""

    def __init__(
        self,
        output_root: str | Path | None = None,
        *,
        budget: SafeLengthBudget | None = None,
        file_manager: FileManager | None = None,
        logger: Logger | None = None,
        exclusive_create: bool = True,
    ) -> None:
        self.output_root = output_root
        self.logger = logger or Logger()
        self.budget = budget or SafeLengthBudget.from_env()
        self.file_manager = file_manager or FileManager(self.logger)
        self.resolver = SafePathResolver(
            self.budget,
            self.file_manager,
            self.logger,
            exclusive_create=exclusive_create,
        )
        self.logger.debug("CONFIG", f"Using {self.budget!r}")

    def get_path(
        self,
        request: ArtifactRequest,
        extension: str | None = None,
        output_root: str | Path | None = None,
        overwrite: bool | None = None,
    ) -> str:
        """
        Build the artifact's name from request and reserve a path for it.
        Arguments left as None fall back to the request, then to the
        resolver's own output_root and overwrite=False.

        A truncated name may end in a split multi-byte character, carried
        as a lone surrogate escape; pass the result through os.fsencode()
        before handing it to anything that encodes strictly as UTF-8.
        """
        extension = extension if extension is not None else request.extension
        if not extension:
            raise ArtifactPathError("An artifact extension is required")

        root = output_root if output_root is not None else request.output_root
        if root is None:
            root = self.output_root
        if root is None:
            raise ArtifactPathError("An output root directory is required")

        if overwrite is None:
            overwrite = bool(request.overwrite)

        name = build_artifact_name(request)
        self.logger.debug("NAME", f"{'/'.join(name.dir_segments)} :: {name.base_name!r}")

        return self.resolver.resolve(name.without_ext(root), extension.lstrip("."), overwrite)


_default_resolver: ArtifactPathResolver | None = None


def default_resolver() -> ArtifactPathResolver:
    """Process-wide resolver, created on first use from the environment."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ArtifactPathResolver()
    return _default_resolver


def get_path(
    request: ArtifactRequest,
    extension: str | None = None,
    output_root: str | Path | None = None,
    overwrite: bool | None = None,
) -> str:
    """
    Resolve request through the process-wide resolver.
    Arguments left as None fall back to the request's own fields.
    """
    return default_resolver().get_path(request, extension, output_root, overwrite)
