"""Plain-text formatter — one line per artifact, optionally colourised."""

from typing import Callable, List

from ..config import FormatOptions
from ..diff.filter import filter_unchanged
from ..diff.models import DiffRecord, Status
from ..sizes import format_size, sign
from ._style import colorize, plain
from .base import BaseFormatter
from .markdown_formatter import NO_CHANGES

# Records are separated by one blank line
TEXT_RECORD_SEPARATOR = "\n\n"


class TextFormatter(BaseFormatter):
    """Render diff records as ``name: files=.., size=.., gzip=.., brotli=..`` lines."""

    def format(self, records: List[DiffRecord], options: FormatOptions) -> str:
        shown = filter_unchanged(records, options.unchanged)
        if not shown:
            return NO_CHANGES if options.header else ""

        style = colorize if options.color else plain
        return TEXT_RECORD_SEPARATOR.join(self._render_record(r, style) for r in shown)

    def _render_record(self, record: DiffRecord, style: Callable[[str], str]) -> str:
        if record.status is Status.REMOVED:
            return f"{record.name}: removed"
        if record.status in (Status.ADDED, Status.UPDATED):
            return self._render_sizes(record, style)
        raise ValueError(f"Unknown status: {record.status!r}")

    def _render_sizes(self, record: DiffRecord, style: Callable[[str], str]) -> str:
        files_diff = len(record.new_files) - len(record.old_files)
        parts = [
            f"files={style(str(len(record.new_files)))} ({sign(files_diff)}{abs(files_diff)})",
            format_size("size", record.raw, "text", style),
        ]
        if record.gzip is not None:
            parts.append(format_size("gzip", record.gzip, "text", style))
        if record.brotli is not None:
            parts.append(format_size("brotli", record.brotli, "text", style))
        return f"{record.name}: {', '.join(parts)}"
