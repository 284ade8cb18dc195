"""Exception hierarchy for the artifact size analyzer."""

from .analysis import AnalysisError, FileAccessError, SnapshotFormatError
from .base import ArtifactSizeError
from .config import (
    ConfigurationError,
    DuplicateArtifactError,
    InvalidConfigError,
    InvalidOutputSpecError,
)

__all__ = [
    "ArtifactSizeError",
    "AnalysisError",
    "FileAccessError",
    "SnapshotFormatError",
    "ConfigurationError",
    "InvalidConfigError",
    "DuplicateArtifactError",
    "InvalidOutputSpecError",
]
