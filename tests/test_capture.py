"""Tests for measuring files and artifacts on disk."""

import gzip

import brotli
import pytest

from artifact_size_analyzer.config import ArtifactConfig, SizeConfig
from artifact_size_analyzer.exceptions import FileAccessError
from artifact_size_analyzer.snapshot.capture import (
    GZIP_LEVEL,
    analyze_artifact,
    analyze_artifacts,
    get_file_size,
    get_files,
)

APP_JS = b"function hello() { return 'hello world'; }\n" * 50
VENDOR_JS = b"var vendor = [1, 2, 3, 4, 5, 6, 7, 8, 9];\n" * 20


@pytest.fixture
def build_dir(tmp_path):
    dist = tmp_path / "dist"
    (dist / "vendor").mkdir(parents=True)
    (dist / "app.js").write_bytes(APP_JS)
    (dist / "app.js.map").write_bytes(b"{}")
    (dist / "vendor" / "lib.js").write_bytes(VENDOR_JS)
    (dist / "style.css").write_bytes(b"body { color: red; }\n")
    return tmp_path


class TestGetFiles:
    def test_include(self, build_dir):
        assert get_files(["dist/**/*.js"], [], build_dir) == ["dist/app.js", "dist/vendor/lib.js"]

    def test_exclude(self, build_dir):
        assert get_files(["dist/**/*"], ["dist/**/*.map", "dist/vendor/*"], build_dir) == [
            "dist/app.js",
            "dist/style.css",
        ]

    def test_directories_skipped(self, build_dir):
        assert "dist/vendor" not in get_files(["dist/*"], [], build_dir)

    def test_no_matches(self, build_dir):
        assert get_files(["build/*.js"], [], build_dir) == []

    def test_sorted_and_unique(self, build_dir):
        files = get_files(["dist/*.js", "dist/app.*"], [], build_dir)
        assert files == ["dist/app.js", "dist/app.js.map"]


class TestGetFileSize:
    def test_all_metrics(self, build_dir):
        entry = get_file_size("dist/app.js", build_dir)

        assert entry.filename == "dist/app.js"
        assert entry.size == len(APP_JS)
        assert entry.gzip == len(gzip.compress(APP_JS, compresslevel=GZIP_LEVEL, mtime=0))
        assert entry.brotli == len(brotli.compress(APP_JS))
        assert entry.gzip < entry.size

    def test_disabled_algorithms(self, build_dir):
        entry = get_file_size("dist/app.js", build_dir, gzip_enabled=False, brotli_enabled=False)

        assert entry.size == len(APP_JS)
        assert entry.gzip is None
        assert entry.brotli is None

    def test_missing_file(self, build_dir):
        with pytest.raises(FileAccessError):
            get_file_size("dist/missing.js", build_dir)


class TestAnalyzeArtifact:
    def test_sums_file_sizes(self, build_dir):
        artifact = ArtifactConfig(id="js", name="JavaScript", include=["dist/**/*.js"])
        snapshot = analyze_artifact(artifact, build_dir)

        assert snapshot.id == "js"
        assert snapshot.name == "JavaScript"
        assert [f.filename for f in snapshot.files] == ["dist/app.js", "dist/vendor/lib.js"]
        assert snapshot.size == len(APP_JS) + len(VENDOR_JS)
        assert snapshot.gzip == sum(f.gzip for f in snapshot.files)
        assert snapshot.brotli == sum(f.brotli for f in snapshot.files)

    def test_compression_disabled(self, build_dir):
        artifact = ArtifactConfig(id="css", name="CSS", include=["dist/*.css"], compression=["gzip"])
        snapshot = analyze_artifact(artifact, build_dir)

        assert snapshot.gzip is not None
        assert snapshot.brotli is None
        assert snapshot.files[0].brotli is None

    def test_empty_artifact(self, build_dir):
        snapshot = analyze_artifact(ArtifactConfig(id="none", name="None"), build_dir)

        assert snapshot.files == []
        assert snapshot.size == 0
        assert snapshot.gzip == 0
        assert snapshot.brotli == 0


class TestAnalyzeArtifacts:
    def test_preserves_config_order(self, build_dir):
        config = SizeConfig(
            artifacts=[
                ArtifactConfig(id="css", name="CSS", include=["dist/*.css"]),
                ArtifactConfig(id="js", name="JS", include=["dist/**/*.js"]),
                ArtifactConfig(id="maps", name="Maps", include=["dist/*.map"]),
            ]
        )
        snapshots = analyze_artifacts(config, build_dir, workers=3)

        assert [s.id for s in snapshots] == ["css", "js", "maps"]

    def test_empty_config(self, build_dir):
        assert analyze_artifacts(SizeConfig(), build_dir) == []
