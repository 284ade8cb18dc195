"""Tests for formatting a single analysis run."""

import json

import pytest

from artifact_size_analyzer.config import FormatOptions
from artifact_size_analyzer.formatters import format_artifacts
from artifact_size_analyzer.snapshot.models import (
    ArtifactSnapshot,
    FileEntry,
    snapshots_from_json,
)


@pytest.fixture
def snapshots():
    return [
        ArtifactSnapshot(
            id="app",
            name="App bundle",
            files=[
                FileEntry("dist/app.js", 60, 50, 45),
                FileEntry("dist/app.css", 40, 30, 25),
            ],
            size=100,
            gzip=80,
            brotli=70,
        ),
        ArtifactSnapshot(id="img", name="Images", files=[], size=0, gzip=None, brotli=None),
    ]


class TestFormatArtifacts:
    def test_json_is_loadable_snapshot(self, snapshots):
        output = format_artifacts(snapshots, "json")
        assert snapshots_from_json(output) == snapshots

    def test_json_key_order(self, snapshots):
        data = json.loads(format_artifacts(snapshots, "json"))
        assert list(data[0]) == ["id", "name", "files", "size", "gzip", "brotli"]

    def test_markdown(self, snapshots):
        assert format_artifacts(snapshots, "markdown") == (
            "## Artifact sizes\n\n"
            "| Artifact | Files | Size | Gzip | Brotli |\n"
            "|---|---|---:|---:|---:|\n"
            "| `App bundle` | 2 file(s) | 100B | 80B | 70B |\n"
            "| `Images` | 0 file(s) | 0B | - | - |\n"
        )

    def test_markdown_no_header(self, snapshots):
        output = format_artifacts(snapshots, "markdown", FormatOptions(header=False))
        assert output.startswith("| Artifact |")

    def test_text(self, snapshots):
        assert format_artifacts(snapshots, "text") == (
            "App bundle: files=2, size=100B, gzip=80B, brotli=70B\n"
            " ├ dist/app.js size=60B, gzip=50B, brotli=45B\n"
            " └ dist/app.css size=40B, gzip=30B, brotli=25B\n"
            "Images: files=0, size=0B, gzip=-, brotli=-"
        )

    def test_text_color(self, snapshots, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        output = format_artifacts(snapshots, "text", FormatOptions(color=True))
        assert "\x1b[" in output

    def test_unknown_format(self, snapshots):
        with pytest.raises(ValueError, match="Unknown format"):
            format_artifacts(snapshots, "yaml")
