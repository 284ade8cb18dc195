"""Unchanged filtering — decides which diff records make the headline list.

Only artifacts that exist in both snapshots with an identical raw size are
ever dropped.  Added and removed artifacts are structural changes and are
always kept, even when their numeric delta happens to be zero.

``hide`` and ``collapse`` select the same headline subset; whether the
dropped records are discarded or shown in a collapsible appendix is decided
by the renderer.
"""

from enum import Enum
from typing import List, Union

from .models import DiffRecord


class UnchangedMode(str, Enum):
    """How reports treat artifacts whose size did not change."""

    SHOW = "show"
    HIDE = "hide"
    COLLAPSE = "collapse"


UNCHANGED_MODES = tuple(m.value for m in UnchangedMode)


def filter_unchanged(
    records: List[DiffRecord],
    mode: Union[UnchangedMode, str] = UnchangedMode.SHOW,
) -> List[DiffRecord]:
    """Return the records to present inline, in their original order."""
    mode = UnchangedMode(mode)
    if mode is UnchangedMode.SHOW:
        return list(records)
    return [r for r in records if not r.is_unchanged]


def omitted_records(
    records: List[DiffRecord],
    mode: Union[UnchangedMode, str] = UnchangedMode.SHOW,
) -> List[DiffRecord]:
    """Return the records ``filter_unchanged`` drops for ``mode``."""
    mode = UnchangedMode(mode)
    if mode is UnchangedMode.SHOW:
        return []
    return [r for r in records if r.is_unchanged]
