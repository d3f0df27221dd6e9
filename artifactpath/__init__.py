"""Unique, filesystem-safe output paths for test artifacts."""

from artifactpath.fs.file_manager import FileManager
from artifactpath.fs.path_generator import ArtifactName, ArtifactRequest, build_artifact_name, sanitize
from artifactpath.resolver.artifact_resolver import ArtifactPathResolver, get_path
from artifactpath.resolver.budget import SafeLengthBudget
from artifactpath.resolver.safe_path import SafePathResolver

__version__ = "0.1.0"

__all__ = [
    "ArtifactName",
    "ArtifactPathResolver",
    "ArtifactRequest",
    "FileManager",
    "SafeLengthBudget",
    "SafePathResolver",
    "build_artifact_name",
    "get_path",
    "sanitize",
]
