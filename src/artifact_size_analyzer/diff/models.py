"""Data models for snapshot diffing — per-metric deltas and per-artifact records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..exceptions import SnapshotFormatError
from ..snapshot.models import FileEntry


class Status(str, Enum):
    """Lifecycle of an artifact between the base and current snapshot."""

    ADDED = "added"  # current only
    REMOVED = "removed"  # base only
    UPDATED = "updated"  # present in both


@dataclass(frozen=True)
class MetricDiff:
    """Change in a single size metric between two snapshots."""

    old_size: int
    new_size: int
    difference: int  # new - old

    def to_dict(self) -> Dict[str, int]:
        return {
            "oldSize": self.old_size,
            "newSize": self.new_size,
            "difference": self.difference,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetricDiff":
        return cls(
            old_size=data["oldSize"],
            new_size=data["newSize"],
            difference=data["difference"],
        )


@dataclass(frozen=True)
class DiffRecord:
    """Comparison of one artifact across the base and current snapshot.

    ``gzip``/``brotli`` are ``None`` when the algorithm was disabled on a
    side that supplied the artifact.  ``raw`` is always present.
    """

    id: str
    name: str
    status: Status
    raw: MetricDiff
    gzip: Optional[MetricDiff]
    brotli: Optional[MetricDiff]
    old_files: List[FileEntry] = field(default_factory=list)
    new_files: List[FileEntry] = field(default_factory=list)

    @property
    def is_unchanged(self) -> bool:
        """True for an artifact present in both snapshots with identical raw size."""
        return self.status is Status.UPDATED and self.raw.difference == 0

    @property
    def has_compression(self) -> bool:
        return self.gzip is not None or self.brotli is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "raw": self.raw.to_dict(),
            "gzip": self.gzip.to_dict() if self.gzip is not None else None,
            "brotli": self.brotli.to_dict() if self.brotli is not None else None,
            "oldFiles": [f.to_dict() for f in self.old_files],
            "newFiles": [f.to_dict() for f in self.new_files],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiffRecord":
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                status=Status(data["status"]),
                raw=MetricDiff.from_dict(data["raw"]),
                gzip=MetricDiff.from_dict(data["gzip"]) if data.get("gzip") is not None else None,
                brotli=MetricDiff.from_dict(data["brotli"]) if data.get("brotli") is not None else None,
                old_files=[FileEntry.from_dict(f) for f in data.get("oldFiles", [])],
                new_files=[FileEntry.from_dict(f) for f in data.get("newFiles", [])],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotFormatError("<diff>", f"invalid diff record: {e}")
