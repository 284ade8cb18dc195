"""Output formatters for size snapshots and diff reports."""

from typing import List, Optional, Union

from ..config import FormatOptions
from ..diff.models import DiffRecord
from .artifact_formatter import format_artifacts
from .base import BaseFormatter
from .formats import FORMATS, Format
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .text_formatter import TEXT_RECORD_SEPARATOR, TextFormatter

_FORMATTERS = {
    Format.JSON: JsonFormatter,
    Format.MARKDOWN: MarkdownFormatter,
    Format.TEXT: TextFormatter,
}


def get_formatter(name: Union[Format, str]) -> BaseFormatter:
    """Get a diff formatter instance by name.

    Args:
        name: One of "json", "markdown", "text"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    try:
        fmt = Format(name)
    except ValueError:
        raise ValueError(f"Unknown format: {name!r}. Choose from: {', '.join(FORMATS)}")
    return _FORMATTERS[fmt]()


def format_diff(
    records: List[DiffRecord],
    fmt: Union[Format, str] = Format.TEXT,
    options: Optional[FormatOptions] = None,
) -> str:
    """Render diff records in the requested format.

    ``options`` defaults to ``FormatOptions()``: no colour, with header,
    unchanged artifacts shown.
    """
    return get_formatter(fmt).format(records, options or FormatOptions())


__all__ = [
    "BaseFormatter",
    "FORMATS",
    "Format",
    "JsonFormatter",
    "MarkdownFormatter",
    "TEXT_RECORD_SEPARATOR",
    "TextFormatter",
    "format_artifacts",
    "format_diff",
    "get_formatter",
]
