"""Shared test fixtures for artifact size analyzer tests."""

import pytest

from artifact_size_analyzer.snapshot.models import ArtifactSnapshot, FileEntry


def make_files(count, prefix="file"):
    """Build ``count`` placeholder file entries."""
    return [FileEntry(f"{prefix}{i}.js", 1, 1, 1) for i in range(count)]


def make_snapshot(artifact_id, size, gzip=None, brotli=None, files=1, name=None):
    """Build an artifact snapshot with ``files`` placeholder file entries."""
    return ArtifactSnapshot(
        id=artifact_id,
        name=name or artifact_id,
        files=make_files(files, prefix=f"{artifact_id}/"),
        size=size,
        gzip=gzip,
        brotli=brotli,
    )


@pytest.fixture
def mixed_changes():
    """One grown artifact, one unchanged, one shrunk."""
    base = [
        make_snapshot("app", 90, gzip=75, brotli=72, files=2),
        make_snapshot("lib", 200, gzip=150, brotli=120),
        make_snapshot("vendor", 300, gzip=250, brotli=230),
    ]
    current = [
        make_snapshot("app", 100, gzip=80, brotli=70, files=2),
        make_snapshot("lib", 200, gzip=150, brotli=120),
        make_snapshot("vendor", 250, gzip=210, brotli=200),
    ]
    return base, current


@pytest.fixture
def single_added():
    """Current build introduces a new artifact."""
    return [], [make_snapshot("new", 150, gzip=100, brotli=80)]


@pytest.fixture
def single_removed():
    """Current build drops an artifact."""
    return [make_snapshot("old", 200, gzip=120, brotli=100)], []


@pytest.fixture
def gzip_only():
    """Artifacts measured with gzip but not brotli."""
    base = [make_snapshot("app", 1000, gzip=400)]
    current = [make_snapshot("app", 1100, gzip=450)]
    return base, current


@pytest.fixture
def no_compression():
    """Artifacts measured without any compression."""
    base = [make_snapshot("app", 1000)]
    current = [make_snapshot("app", 900)]
    return base, current


@pytest.fixture
def all_unchanged():
    """Two artifacts whose sizes are identical in both builds."""
    base = [
        make_snapshot("app", 100, gzip=80, brotli=70),
        make_snapshot("lib", 200, gzip=150, brotli=120),
    ]
    current = [
        make_snapshot("app", 100, gzip=80, brotli=70),
        make_snapshot("lib", 200, gzip=150, brotli=120),
    ]
    return base, current


@pytest.fixture
def snapshot_json():
    """A snapshot document as written by ``analyze --format=json``."""
    return """[
  {
    "id": "app",
    "name": "App bundle",
    "files": [
      {"filename": "dist/app.js", "size": 100, "gzip": 80, "brotli": 70}
    ],
    "size": 100,
    "gzip": 80,
    "brotli": 70
  }
]"""


@pytest.fixture
def assorted_changes():
    """Every status, unchanged artifacts and disabled compression in one set."""
    base = [
        make_snapshot("grown", 100, gzip=80, brotli=70),
        make_snapshot("same", 200, gzip=150, brotli=120),
        make_snapshot("plain", 300),
        make_snapshot("gone", 50, gzip=40),
        make_snapshot("same-plain", 10),
    ]
    current = [
        make_snapshot("grown", 120, gzip=90, brotli=75, files=2),
        make_snapshot("same", 200, gzip=150, brotli=120),
        make_snapshot("plain", 250),
        make_snapshot("same-plain", 10),
        make_snapshot("fresh", 0, brotli=0),
    ]
    return base, current
