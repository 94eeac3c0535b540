"""Output formatters for linescan."""

from typing import Optional

from rich.console import Console

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter

FORMATTERS = {
    "rich": RichFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str, console: Optional[Console] = None) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"
        console: Console to render to (default: stdout)

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls(console)


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "FORMATTERS",
    "get_formatter",
]
