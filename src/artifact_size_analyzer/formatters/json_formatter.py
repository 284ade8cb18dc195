"""JSON formatter — the canonical, machine-readable diff report."""

import json
from typing import List

from ..config import FormatOptions
from ..diff.models import DiffRecord
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render every diff record as pretty-printed JSON.

    Unchanged filtering never applies here: the JSON report is what later
    steps consume, so it always contains the full record list.
    """

    def format(self, records: List[DiffRecord], options: FormatOptions) -> str:
        return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)
