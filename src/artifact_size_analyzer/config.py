"""Configuration loading and management for the artifact size analyzer.

Two kinds of configuration live here:

  * ``SizeConfig`` — which artifacts to measure, read from a JSON (or TOML)
    file and validated before any file is touched.
  * ``FormatOptions`` — how reports are rendered.  Sources are merged in
    priority order:
        1. Defaults (defined in FormatOptions)
        2. Environment variables (ARTIFACT_SIZE_* prefix)
        3. Explicit overrides (typically CLI flags)

Example:
    >>> options = load_format_options(unchanged="collapse")
    >>> options.unchanged
    <UnchangedMode.COLLAPSE: 'collapse'>
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .diff.filter import UNCHANGED_MODES, UnchangedMode
from .exceptions import (
    ArtifactSizeError,
    DuplicateArtifactError,
    InvalidConfigError,
)

COMPRESSION_ALGORITHMS: Tuple[str, ...] = ("gzip", "brotli")

ENV_PREFIX = "ARTIFACT_SIZE_"


# ── Render options ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FormatOptions:
    """Rendering options shared by every report format.

    Attributes:
        color: Wrap numeric values in terminal colour codes (text format only)
        header: Emit the ``## Artifact sizes`` heading / no-change sentence
        unchanged: ``show``, ``hide`` or ``collapse`` size-identical artifacts
    """

    color: bool = False
    header: bool = True
    unchanged: UnchangedMode = UnchangedMode.SHOW

    def __post_init__(self) -> None:
        if self.unchanged not in UNCHANGED_MODES:
            raise InvalidConfigError(
                "unchanged", self.unchanged, f"expected one of {', '.join(UNCHANGED_MODES)}"
            )
        # Frozen dataclass: normalise plain strings to the enum in place
        object.__setattr__(self, "unchanged", UnchangedMode(self.unchanged))


def load_format_options(**overrides: Any) -> FormatOptions:
    """Build ``FormatOptions`` from defaults, environment and overrides.

    Supported environment variables:
        ARTIFACT_SIZE_COLOR: bool (true/false/1/0)
        ARTIFACT_SIZE_HEADER: bool
        ARTIFACT_SIZE_UNCHANGED: show/hide/collapse

    ``None`` overrides are ignored so CLI flags that were not given fall
    through to the environment.
    """
    merged: Dict[str, Any] = {}

    for field_name in ("color", "header"):
        env_value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if env_value is not None:
            merged[field_name] = _parse_bool(env_value, f"{ENV_PREFIX}{field_name.upper()}")

    env_unchanged = os.environ.get(f"{ENV_PREFIX}UNCHANGED")
    if env_unchanged is not None:
        merged["unchanged"] = env_unchanged.lower()

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return FormatOptions(**merged)
    except TypeError as e:
        raise ArtifactSizeError(f"Invalid format options: {e}")


def _parse_bool(value: str, key: str) -> bool:
    lower = value.lower()
    if lower in ("true", "1", "yes", "on"):
        return True
    if lower in ("false", "0", "no", "off"):
        return False
    raise InvalidConfigError(key, value, "expected true/false")


# ── Artifact configuration ──────────────────────────────────────────────────

@dataclass(frozen=True)
class ArtifactConfig:
    """One artifact to measure: a named group of files selected by globs."""

    id: str
    name: str
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    compression: List[str] = field(default_factory=lambda: list(COMPRESSION_ALGORITHMS))

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise InvalidConfigError("id", self.id, "must be a non-empty string")
        if not isinstance(self.name, str) or not self.name:
            raise InvalidConfigError(f"artifacts.{self.id}.name", self.name, "must be a non-empty string")
        for key in ("include", "exclude"):
            for pattern in getattr(self, key):
                _check_glob(pattern, f"artifacts.{self.id}.{key}")
        for algorithm in self.compression:
            if algorithm not in COMPRESSION_ALGORITHMS:
                raise InvalidConfigError(
                    f"artifacts.{self.id}.compression",
                    algorithm,
                    f"expected one of {', '.join(COMPRESSION_ALGORITHMS)}",
                )

    @property
    def gzip(self) -> bool:
        return "gzip" in self.compression

    @property
    def brotli(self) -> bool:
        return "brotli" in self.compression


@dataclass(frozen=True)
class SizeConfig:
    """All artifacts declared in a configuration file."""

    artifacts: List[ArtifactConfig] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen = set()
        for artifact in self.artifacts:
            if artifact.id in seen:
                raise DuplicateArtifactError(artifact.id)
            seen.add(artifact.id)


def _check_glob(pattern: str, key: str) -> None:
    # Globs are resolved against the working directory
    if not pattern:
        raise InvalidConfigError(key, pattern, "glob pattern must not be empty")
    if Path(pattern).is_absolute() or pattern.startswith(("/", "\\")):
        raise InvalidConfigError(key, pattern, "glob pattern must be relative")


_ARTIFACT_KEYS = frozenset({"id", "name", "include", "exclude", "compression"})


def _to_list(value: Union[str, List[str], None], key: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise InvalidConfigError(key, value, "must be a string or a list of strings")


def _normalize_compression(value: Any, key: str) -> List[str]:
    if value is None:
        return list(COMPRESSION_ALGORITHMS)
    if value is False:
        return []
    if value is True:
        raise InvalidConfigError(key, value, "use false to disable compression or list the algorithms")
    return _to_list(value, key)


def normalize_config(raw: Dict[str, Any]) -> SizeConfig:
    """Validate a parsed configuration document and build a ``SizeConfig``.

    Raises:
        InvalidConfigError: On unknown keys, wrong types or bad values
        DuplicateArtifactError: When two artifacts share an id
    """
    if not isinstance(raw, dict):
        raise InvalidConfigError("<root>", type(raw).__name__, "config must be an object")

    unknown = set(raw) - {"artifacts"}
    if unknown:
        raise InvalidConfigError("<root>", ", ".join(sorted(unknown)), "unknown top-level properties")

    entries = raw.get("artifacts", [])
    if not isinstance(entries, list):
        raise InvalidConfigError("artifacts", entries, "must be a list")

    artifacts: List[ArtifactConfig] = []
    for index, entry in enumerate(entries):
        prefix = f"artifacts.{index}"
        if not isinstance(entry, dict):
            raise InvalidConfigError(prefix, entry, "must be an object")

        unknown = set(entry) - _ARTIFACT_KEYS
        if unknown:
            raise InvalidConfigError(prefix, ", ".join(sorted(unknown)), "unknown properties")
        for required in ("id", "name"):
            if required not in entry:
                raise InvalidConfigError(prefix, entry, f"missing required property '{required}'")

        artifacts.append(
            ArtifactConfig(
                id=entry["id"],
                name=entry["name"],
                include=_to_list(entry.get("include"), f"{prefix}.include"),
                exclude=_to_list(entry.get("exclude"), f"{prefix}.exclude"),
                compression=_normalize_compression(entry.get("compression"), f"{prefix}.compression"),
            )
        )

    return SizeConfig(artifacts=artifacts)


def load_config(config_file: Path) -> SizeConfig:
    """Read and validate an artifact configuration file.

    ``.toml`` files are parsed as TOML, everything else as JSON.

    Raises:
        ArtifactSizeError: If the file is missing or cannot be parsed
        InvalidConfigError: If the content is invalid
    """
    config_file = Path(config_file)
    if not config_file.exists():
        raise ArtifactSizeError(f"Config file not found: {config_file}")

    try:
        if config_file.suffix == ".toml":
            raw = _load_toml_file(config_file)
        else:
            raw = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ArtifactSizeError(f"Invalid config file '{config_file}': {e}")

    return normalize_config(raw)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ArtifactSizeError: If tomllib/tomli not available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ArtifactSizeError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
