"""Analysis-related exceptions: file access and snapshot data issues."""

from pathlib import Path

from .base import ArtifactSizeError


class AnalysisError(ArtifactSizeError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class SnapshotFormatError(AnalysisError):
    """Raised when a saved snapshot does not have the expected shape."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Malformed snapshot: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason
