"""Base formatter interface for diff report rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..config import FormatOptions
from ..diff.models import DiffRecord


class BaseFormatter(ABC):
    """Abstract base class for diff report formatters."""

    @abstractmethod
    def format(self, records: List[DiffRecord], options: FormatOptions) -> str:
        """Return formatted string representation of the diff records."""
