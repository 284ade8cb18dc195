"""Diff engine — reconciles two size snapshots into per-artifact diff records.

Artifacts are matched by ``id``.  The output keeps every id that appears in
the base snapshot first (in base order), followed by ids that only appear in
the current snapshot (in current order).  Each id is dispatched to exactly
one of three constructors depending on which side supplied it:

  - ``diff_updated``: present in both
  - ``diff_added``:   current only
  - ``diff_removed``: base only

A compressed metric is ``None`` whenever a side that supplied the artifact
has that algorithm disabled.
"""

from typing import Dict, List, Optional

from ..snapshot.models import ArtifactSnapshot
from .models import DiffRecord, MetricDiff, Status


# ── Metric helpers ───────────────────────────────────────────────────────────

def _metric(old: Optional[int], new: Optional[int]) -> Optional[MetricDiff]:
    """Build a metric delta, or ``None`` if either side lacks the metric."""
    if old is None or new is None:
        return None
    return MetricDiff(old_size=old, new_size=new, difference=new - old)


# ── Pairwise constructors ────────────────────────────────────────────────────

def diff_updated(base: ArtifactSnapshot, current: ArtifactSnapshot) -> DiffRecord:
    """Compare an artifact present in both snapshots."""
    return DiffRecord(
        id=current.id,
        name=current.name,
        status=Status.UPDATED,
        raw=MetricDiff(
            old_size=base.size,
            new_size=current.size,
            difference=current.size - base.size,
        ),
        gzip=_metric(base.gzip, current.gzip),
        brotli=_metric(base.brotli, current.brotli),
        old_files=list(base.files),
        new_files=list(current.files),
    )


def diff_added(current: ArtifactSnapshot) -> DiffRecord:
    """Describe an artifact that only exists in the current snapshot."""
    return DiffRecord(
        id=current.id,
        name=current.name,
        status=Status.ADDED,
        raw=MetricDiff(old_size=0, new_size=current.size, difference=current.size),
        gzip=_metric(0, current.gzip),
        brotli=_metric(0, current.brotli),
        old_files=[],
        new_files=list(current.files),
    )


def diff_removed(base: ArtifactSnapshot) -> DiffRecord:
    """Describe an artifact that only exists in the base snapshot."""
    return DiffRecord(
        id=base.id,
        name=base.name,
        status=Status.REMOVED,
        raw=MetricDiff(old_size=base.size, new_size=0, difference=-base.size),
        gzip=_metric(base.gzip, 0),
        brotli=_metric(base.brotli, 0),
        old_files=list(base.files),
        new_files=[],
    )


# ── Public API ───────────────────────────────────────────────────────────────

def compare_artifacts(
    base: List[ArtifactSnapshot],
    current: List[ArtifactSnapshot],
) -> List[DiffRecord]:
    """Compute one diff record per artifact id found in either snapshot.

    Args:
        base: The earlier snapshot (e.g. from the target branch).
        current: The later snapshot (e.g. from the pull request).

    Returns:
        Diff records ordered by first appearance: base ids in base order,
        then current-only ids in current order.  Neither input is mutated.
    """
    base_by_id: Dict[str, ArtifactSnapshot] = {a.id: a for a in base}
    current_by_id: Dict[str, ArtifactSnapshot] = {a.id: a for a in current}

    # dict preserves insertion order, so this is an ordered union
    ids = list(dict.fromkeys([a.id for a in base] + [a.id for a in current]))

    records: List[DiffRecord] = []
    for artifact_id in ids:
        old = base_by_id.get(artifact_id)
        new = current_by_id.get(artifact_id)

        if old is not None and new is not None:
            records.append(diff_updated(old, new))
        elif new is not None:
            records.append(diff_added(new))
        else:
            records.append(diff_removed(old))

    return records
