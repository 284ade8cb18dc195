"""Tests for artifact configuration and render options."""

import json

import pytest

from artifact_size_analyzer.config import (
    ArtifactConfig,
    FormatOptions,
    load_config,
    load_format_options,
    normalize_config,
)
from artifact_size_analyzer.diff import UnchangedMode
from artifact_size_analyzer.exceptions import (
    ArtifactSizeError,
    DuplicateArtifactError,
    InvalidConfigError,
)


class TestNormalizeConfig:
    def test_minimal_artifact(self):
        config = normalize_config({"artifacts": [{"id": "app", "name": "App"}]})
        artifact = config.artifacts[0]

        assert artifact.id == "app"
        assert artifact.include == []
        assert artifact.exclude == []
        assert artifact.compression == ["gzip", "brotli"]
        assert artifact.gzip and artifact.brotli

    def test_string_globs_become_lists(self):
        config = normalize_config(
            {"artifacts": [{"id": "app", "name": "App", "include": "dist/*.js", "exclude": "*.map"}]}
        )
        assert config.artifacts[0].include == ["dist/*.js"]
        assert config.artifacts[0].exclude == ["*.map"]

    def test_compression_false_disables_all(self):
        config = normalize_config({"artifacts": [{"id": "a", "name": "A", "compression": False}]})
        artifact = config.artifacts[0]

        assert artifact.compression == []
        assert not artifact.gzip
        assert not artifact.brotli

    def test_single_compression_algorithm(self):
        config = normalize_config({"artifacts": [{"id": "a", "name": "A", "compression": "gzip"}]})
        assert config.artifacts[0].gzip
        assert not config.artifacts[0].brotli

    def test_compression_true_rejected(self):
        with pytest.raises(InvalidConfigError):
            normalize_config({"artifacts": [{"id": "a", "name": "A", "compression": True}]})

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            normalize_config({"artifacts": [{"id": "a", "name": "A", "compression": ["zstd"]}]})
        assert exc_info.value.key == "artifacts.a.compression"

    def test_unknown_top_level_key(self):
        with pytest.raises(InvalidConfigError):
            normalize_config({"artifacts": [], "extra": 1})

    def test_unknown_artifact_key(self):
        with pytest.raises(InvalidConfigError):
            normalize_config({"artifacts": [{"id": "a", "name": "A", "path": "dist"}]})

    def test_missing_name(self):
        with pytest.raises(InvalidConfigError, match="artifacts.0"):
            normalize_config({"artifacts": [{"id": "a"}]})

    def test_bad_include_type(self):
        with pytest.raises(InvalidConfigError):
            normalize_config({"artifacts": [{"id": "a", "name": "A", "include": [1, 2]}]})

    @pytest.mark.parametrize("pattern", ["", "/abs/dist/*.js"])
    def test_rejects_empty_or_absolute_globs(self, pattern):
        for key in ("include", "exclude"):
            with pytest.raises(InvalidConfigError) as exc_info:
                normalize_config({"artifacts": [{"id": "a", "name": "A", key: [pattern]}]})
            assert exc_info.value.key == f"artifacts.a.{key}"

    def test_duplicate_ids(self):
        raw = {"artifacts": [{"id": "a", "name": "A"}, {"id": "a", "name": "B"}]}
        with pytest.raises(DuplicateArtifactError) as exc_info:
            normalize_config(raw)
        assert str(exc_info.value) == 'Duplicate artifact id "a" found in config'

    def test_empty_artifacts(self):
        assert normalize_config({}).artifacts == []

    def test_artifact_config_validates_id(self):
        with pytest.raises(InvalidConfigError):
            ArtifactConfig(id="", name="x")


class TestLoadConfig:
    def test_json(self, tmp_path):
        path = tmp_path / "artifacts.json"
        path.write_text(json.dumps({"artifacts": [{"id": "app", "name": "App", "include": ["dist/*"]}]}))

        config = load_config(path)
        assert [a.id for a in config.artifacts] == ["app"]

    def test_toml(self, tmp_path):
        path = tmp_path / "artifacts.toml"
        path.write_text(
            '[[artifacts]]\nid = "app"\nname = "App"\ninclude = ["dist/*.js"]\ncompression = ["gzip"]\n'
        )

        artifact = load_config(path).artifacts[0]
        assert artifact.include == ["dist/*.js"]
        assert artifact.compression == ["gzip"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactSizeError, match="Config file not found"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "artifacts.json"
        path.write_text("{not json")

        with pytest.raises(ArtifactSizeError, match="Invalid config file"):
            load_config(path)


class TestFormatOptions:
    def test_defaults(self):
        options = FormatOptions()
        assert options.color is False
        assert options.header is True
        assert options.unchanged is UnchangedMode.SHOW

    def test_string_mode_normalized(self):
        assert FormatOptions(unchanged="collapse").unchanged is UnchangedMode.COLLAPSE

    def test_invalid_mode(self):
        with pytest.raises(InvalidConfigError):
            FormatOptions(unchanged="sometimes")


class TestLoadFormatOptions:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("ARTIFACT_SIZE_COLOR", "ARTIFACT_SIZE_HEADER", "ARTIFACT_SIZE_UNCHANGED"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        assert load_format_options() == FormatOptions()

    def test_env_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("ARTIFACT_SIZE_HEADER", "false")
        monkeypatch.setenv("ARTIFACT_SIZE_UNCHANGED", "Collapse")

        options = load_format_options()
        assert options.header is False
        assert options.unchanged is UnchangedMode.COLLAPSE

    def test_explicit_overrides_env(self, monkeypatch):
        monkeypatch.setenv("ARTIFACT_SIZE_UNCHANGED", "hide")
        assert load_format_options(unchanged="show").unchanged is UnchangedMode.SHOW

    def test_none_override_falls_through(self, monkeypatch):
        monkeypatch.setenv("ARTIFACT_SIZE_COLOR", "1")
        assert load_format_options(color=None).color is True

    def test_invalid_bool(self, monkeypatch):
        monkeypatch.setenv("ARTIFACT_SIZE_HEADER", "maybe")
        with pytest.raises(InvalidConfigError):
            load_format_options()

    def test_unknown_override(self):
        with pytest.raises(ArtifactSizeError, match="Invalid format options"):
            load_format_options(theme="dark")
