"""Data models for size snapshots — immutable records of one analysis run.

A snapshot is a list of ``ArtifactSnapshot`` values.  Each artifact carries
the aggregate raw/gzip/brotli sizes together with the per-file breakdown
they were summed from.  ``None`` for ``gzip`` or ``brotli`` means the
algorithm was disabled when the artifact was measured, not "zero bytes".
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import SnapshotFormatError


def _require_size(data: Dict[str, Any], key: str, source: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SnapshotFormatError(source, f"'{key}' must be a non-negative integer, got {value!r}")
    return value


def _optional_size(data: Dict[str, Any], key: str, source: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    return _require_size(data, key, source)


@dataclass(frozen=True)
class FileEntry:
    """Sizes of a single file, relative to the working directory."""

    filename: str
    size: int
    gzip: Optional[int]
    brotli: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "size": self.size,
            "gzip": self.gzip,
            "brotli": self.brotli,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<file>") -> "FileEntry":
        if not isinstance(data, dict):
            raise SnapshotFormatError(source, f"file entry must be an object, got {type(data).__name__}")
        filename = data.get("filename")
        if not isinstance(filename, str):
            raise SnapshotFormatError(source, "'filename' must be a string")
        return cls(
            filename=filename,
            size=_require_size(data, "size", source),
            gzip=_optional_size(data, "gzip", source),
            brotli=_optional_size(data, "brotli", source),
        )


@dataclass(frozen=True)
class ArtifactSnapshot:
    """Aggregate sizes of one artifact (a named group of files).

    ``size``/``gzip``/``brotli`` are the sums of the per-file values; they
    are 0 when ``files`` is empty.
    """

    id: str
    name: str
    files: List[FileEntry] = field(default_factory=list)
    size: int = 0
    gzip: Optional[int] = 0
    brotli: Optional[int] = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "files": [f.to_dict() for f in self.files],
            "size": self.size,
            "gzip": self.gzip,
            "brotli": self.brotli,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<snapshot>") -> "ArtifactSnapshot":
        if not isinstance(data, dict):
            raise SnapshotFormatError(source, f"artifact must be an object, got {type(data).__name__}")

        artifact_id = data.get("id")
        if not isinstance(artifact_id, str):
            raise SnapshotFormatError(source, "'id' must be a string")

        # Older snapshots label the display name "artifact"
        name = data.get("name", data.get("artifact"))
        if not isinstance(name, str):
            raise SnapshotFormatError(source, f"artifact {artifact_id!r} has no 'name'")

        files = data.get("files", [])
        if not isinstance(files, list):
            raise SnapshotFormatError(source, "'files' must be a list")

        return cls(
            id=artifact_id,
            name=name,
            files=[FileEntry.from_dict(f, source) for f in files],
            size=_require_size(data, "size", source),
            gzip=_optional_size(data, "gzip", source),
            brotli=_optional_size(data, "brotli", source),
        )


def snapshots_from_json(text: str, source: str = "<snapshot>") -> List[ArtifactSnapshot]:
    """Parse a JSON document holding a list of artifact snapshots."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(source, f"invalid JSON: {e}")

    if not isinstance(raw, list):
        raise SnapshotFormatError(source, "top-level value must be a list of artifacts")

    return [ArtifactSnapshot.from_dict(item, source) for item in raw]


def snapshots_to_json(snapshots: List[ArtifactSnapshot]) -> str:
    """Serialize artifact snapshots as pretty-printed JSON."""
    return json.dumps([s.to_dict() for s in snapshots], indent=2, ensure_ascii=False)
