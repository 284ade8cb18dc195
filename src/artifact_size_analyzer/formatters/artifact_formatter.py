"""Formatting of a single snapshot (the ``analyze`` report)."""

from typing import Callable, List, Optional, Union

from ..config import FormatOptions
from ..snapshot.models import ArtifactSnapshot, FileEntry, snapshots_to_json
from ..sizes import pretty_size
from ._style import colorize, plain
from .formats import Format
from .markdown_formatter import HEADER


def _maybe(size: Optional[int]) -> str:
    return "-" if size is None else pretty_size(size)


def _markdown(snapshots: List[ArtifactSnapshot], options: FormatOptions) -> str:
    header = HEADER if options.header else ""
    table_header = "| Artifact | Files | Size | Gzip | Brotli |\n|---|---|---:|---:|---:|\n"
    rows = "\n".join(
        "| "
        + " | ".join([
            f"`{s.name}`",
            f"{len(s.files)} file(s)",
            pretty_size(s.size),
            _maybe(s.gzip),
            _maybe(s.brotli),
        ])
        + " |"
        for s in snapshots
    )
    return f"{header}{table_header}{rows}\n"


def _file_line(entry: FileEntry, last: bool, style: Callable[[str], str]) -> str:
    symbol = "└" if last else "├"
    return ", ".join([
        f" {symbol} {entry.filename} size={style(pretty_size(entry.size))}",
        f"gzip={style(_maybe(entry.gzip))}",
        f"brotli={style(_maybe(entry.brotli))}",
    ])


def _text(snapshots: List[ArtifactSnapshot], options: FormatOptions) -> str:
    style = colorize if options.color else plain
    blocks = []
    for s in snapshots:
        parts = [
            f"files={style(str(len(s.files)))}",
            f"size={style(pretty_size(s.size))}",
            f"gzip={style(_maybe(s.gzip))}",
            f"brotli={style(_maybe(s.brotli))}",
        ]
        lines = [f"{s.name}: {', '.join(parts)}"]
        for i, entry in enumerate(s.files):
            lines.append(_file_line(entry, i == len(s.files) - 1, style))
        blocks.append("\n".join(lines))
    return "\n".join(blocks)


def format_artifacts(
    snapshots: List[ArtifactSnapshot],
    fmt: Union[Format, str] = Format.TEXT,
    options: Optional[FormatOptions] = None,
) -> str:
    """Format the measured artifacts of one analysis run.

    Args:
        snapshots: Artifacts to report on
        fmt: ``json``, ``markdown`` or ``text``
        options: Rendering options; ``unchanged`` has no effect here

    Returns:
        Formatted report

    Raises:
        ValueError: If ``fmt`` is not a supported format
    """
    options = options or FormatOptions()
    try:
        fmt = Format(fmt)
    except ValueError:
        raise ValueError(f"Unknown format: {fmt!r}")

    if fmt is Format.JSON:
        return snapshots_to_json(snapshots)
    if fmt is Format.MARKDOWN:
        return _markdown(snapshots, options)
    return _text(snapshots, options)
