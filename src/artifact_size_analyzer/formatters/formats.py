"""Supported report formats."""

from enum import Enum


class Format(str, Enum):
    """Output formats shared by the analyze and compare reports."""

    JSON = "json"
    MARKDOWN = "markdown"
    TEXT = "text"


FORMATS = tuple(f.value for f in Format)
