"""Snapshot layer — measured artifacts and their serialised form.

Measuring lives in ``snapshot.capture``, which depends on the artifact
configuration and is imported explicitly by its callers.
"""

from .models import ArtifactSnapshot, FileEntry, snapshots_from_json, snapshots_to_json

__all__ = [
    "ArtifactSnapshot",
    "FileEntry",
    "snapshots_from_json",
    "snapshots_to_json",
]
