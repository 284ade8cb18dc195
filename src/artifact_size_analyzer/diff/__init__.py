"""Diff layer — snapshot reconciliation and unchanged filtering."""

from .engine import compare_artifacts, diff_added, diff_removed, diff_updated
from .filter import UNCHANGED_MODES, UnchangedMode, filter_unchanged, omitted_records
from .models import DiffRecord, MetricDiff, Status

__all__ = [
    "DiffRecord",
    "MetricDiff",
    "Status",
    "UNCHANGED_MODES",
    "UnchangedMode",
    "compare_artifacts",
    "diff_added",
    "diff_removed",
    "diff_updated",
    "filter_unchanged",
    "omitted_records",
]
