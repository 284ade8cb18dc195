"""
Artifact Size Analyzer - measure and compare build output sizes.

Measures the raw, gzip and brotli size of grouped build outputs
("artifacts"), persists snapshots as JSON and compares two snapshots into
JSON, Markdown or plain-text change reports.
"""

__version__ = "0.1.0"

from .config import FormatOptions, SizeConfig, load_config
from .diff import (
    DiffRecord,
    MetricDiff,
    Status,
    UnchangedMode,
    compare_artifacts,
    filter_unchanged,
)
from .formatters import Format, format_artifacts, format_diff
from .sizes import format_percent, pretty_size, signed_delta
from .snapshot import ArtifactSnapshot, FileEntry
from .snapshot.capture import analyze_artifact, analyze_artifacts

__all__ = [
    "analyze_artifacts",  # Measure every artifact of a config
    "compare_artifacts",  # Main entry point for diffing
    "format_diff",
    "format_artifacts",
    "analyze_artifact",
    "ArtifactSnapshot",
    "DiffRecord",
    "FileEntry",
    "Format",
    "FormatOptions",
    "MetricDiff",
    "SizeConfig",
    "Status",
    "UnchangedMode",
    "filter_unchanged",
    "format_percent",
    "load_config",
    "pretty_size",
    "signed_delta",
]
