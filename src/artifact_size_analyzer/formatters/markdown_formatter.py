"""Markdown formatter — a table suitable for a pull request comment.

Layout::

    ## Artifact sizes

    Artifact sizes in this build.

    | Artifact | Files | Size | Compressed | Change |
    |---|---|---:|---:|---:|
    | app | 2 file(s) | 90B → **100B** (+10B) | gzip: 80B<br>brotli: 70B | +11.11% |

The ``Compressed`` column is only present when at least one record in the
table has gzip or brotli data.  In ``collapse`` mode the unchanged
artifacts are listed in a ``<details>`` block below the main table.
"""

from typing import List

from ..config import FormatOptions
from ..diff.filter import UnchangedMode, filter_unchanged, omitted_records
from ..diff.models import DiffRecord, Status
from ..sizes import format_percent, format_size, pretty_size, signed_delta
from .base import BaseFormatter

HEADER = "## Artifact sizes\n\n"
NO_CHANGES = "No artifact size changes in this build."

_DESCRIPTION = {
    UnchangedMode.SHOW: "Artifact sizes in this build.",
    UnchangedMode.HIDE: "Artifact sizes in this build (artifacts with unchanged sizes omitted).",
    UnchangedMode.COLLAPSE: "Artifact sizes in this build (unchanged artifacts collapsed below).",
}

_TRAILER_VERB = {
    UnchangedMode.HIDE: "omitted",
    UnchangedMode.COLLAPSE: "collapsed",
}


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _escape_name(name: str) -> str:
    # Keeps names on one line inside a table cell
    return name.replace(" ", "&nbsp;")


def _files(files: list) -> str:
    return f"{len(files)} file(s)"


def _row(cells: List[str]) -> str:
    return f"| {' | '.join(cells)} |"


def _compressed_column(record: DiffRecord) -> str:
    parts = []
    if record.gzip is not None:
        parts.append(format_size("gzip", record.gzip, "markdown"))
    if record.brotli is not None:
        parts.append(format_size("brotli", record.brotli, "markdown"))
    return "<br>".join(parts) if parts else "N/A"


def _table_header(show_compressed: bool, show_change: bool) -> str:
    columns = ["Artifact", "Files", "Size"]
    align = ["---", "---", "---:"]
    if show_compressed:
        columns.append("Compressed")
        align.append("---:")
    if show_change:
        columns.append("Change")
        align.append("---:")
    return f"{_row(columns)}\n|{'|'.join(align)}|\n"


class MarkdownFormatter(BaseFormatter):
    """Render diff records as a GitHub-flavoured Markdown report."""

    def format(self, records: List[DiffRecord], options: FormatOptions) -> str:
        shown = filter_unchanged(records, options.unchanged)
        omitted = omitted_records(records, options.unchanged)

        if not shown:
            return f"{HEADER}{NO_CHANGES}\n" if options.header else ""

        # Without anything omitted the report reads like "show"
        mode = options.unchanged if omitted else UnchangedMode.SHOW

        parts: List[str] = []
        if options.header:
            parts.append(HEADER)
        parts.append(f"{_DESCRIPTION[mode]}\n\n")
        parts.append(self._main_table(shown))

        if omitted:
            parts.append(f"\n*{_plural(len(omitted), 'artifact')} {_TRAILER_VERB[mode]}*\n")

        if omitted and mode is UnchangedMode.COLLAPSE:
            parts.append("\n<details>\n")
            parts.append(f"<summary>{_plural(len(omitted), 'unchanged artifact')}</summary>\n\n")
            parts.append(self._details_table(omitted))
            parts.append("\n</details>\n")

        return "".join(parts)

    # -- main table --

    def _main_table(self, records: List[DiffRecord]) -> str:
        show_compressed = any(r.has_compression for r in records)
        rows = [self._render_row(r, show_compressed) for r in records]
        return _table_header(show_compressed, show_change=True) + "\n".join(rows) + "\n"

    def _render_row(self, record: DiffRecord, show_compressed: bool) -> str:
        if record.status is Status.ADDED:
            return self._added_row(record, show_compressed)
        if record.status is Status.REMOVED:
            return self._removed_row(record, show_compressed)
        if record.status is Status.UPDATED:
            return self._updated_row(record, show_compressed)
        raise ValueError(f"Unknown status: {record.status!r}")

    def _added_row(self, record: DiffRecord, show_compressed: bool) -> str:
        cells = [
            f"{_escape_name(record.name)} (added)",
            _files(record.new_files),
            f"N/A → **{pretty_size(record.raw.new_size)}**",
        ]
        if show_compressed:
            cells.append(_compressed_column(record))
        cells.append("+0.00%")
        return _row(cells)

    def _removed_row(self, record: DiffRecord, show_compressed: bool) -> str:
        cells = [
            f"{_escape_name(record.name)} (removed)",
            "N/A",
            f"{pretty_size(record.raw.old_size)} → N/A",
        ]
        if show_compressed:
            cells.append("N/A")
        cells.append("N/A")
        return _row(cells)

    def _updated_row(self, record: DiffRecord, show_compressed: bool) -> str:
        raw = record.raw
        if raw.difference == 0:
            size = pretty_size(raw.new_size)
            change = "-"
        else:
            size = (
                f"{pretty_size(raw.old_size)} → **{pretty_size(raw.new_size)}** "
                f"({signed_delta(raw.difference)})"
            )
            change = format_percent(raw)

        cells = [_escape_name(record.name), _files(record.new_files), size]
        if show_compressed:
            cells.append(_compressed_column(record))
        cells.append(change)
        return _row(cells)

    # -- collapsed details --

    def _details_table(self, records: List[DiffRecord]) -> str:
        show_compressed = any(r.has_compression for r in records)
        rows = []
        for r in records:
            cells = [_escape_name(r.name), _files(r.new_files), pretty_size(r.raw.new_size)]
            if show_compressed:
                cells.append(_compressed_column(r))
            rows.append(_row(cells))
        return _table_header(show_compressed, show_change=False) + "\n".join(rows) + "\n"
