"""Directory traversal and line counting."""

from .counter import count_lines, read_text
from .finder import file_extension, find_files

__all__ = [
    "count_lines",
    "read_text",
    "file_extension",
    "find_files",
]
