"""Exception hierarchy for linescan."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    InsufficientDataError,
)
from .base import LinescanError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "LinescanError",
    "AnalysisError",
    "FileAccessError",
    "InsufficientDataError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
