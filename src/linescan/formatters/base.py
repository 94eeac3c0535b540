"""Base formatter interface for linescan output rendering."""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from ..models import ScanReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @abstractmethod
    def render(self, report: ScanReport) -> None:
        """Write the report to the formatter's console."""

    @abstractmethod
    def format(self, report: ScanReport) -> str:
        """Return formatted string representation of the report."""
