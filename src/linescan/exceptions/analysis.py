"""Analysis-related exceptions: file access and empty result sets."""

from typing import Dict, Optional

from .base import LinescanError


class AnalysisError(LinescanError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: str, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class InsufficientDataError(AnalysisError):
    """Raised when there's not enough data to summarize."""

    def __init__(self, reason: str, minimum_required: Optional[int] = None):
        details: Dict[str, str] = {"reason": reason}
        if minimum_required is not None:
            details["minimum_required"] = str(minimum_required)

        super().__init__(f"Insufficient data for summary: {reason}", details=details)
        self.reason = reason
        self.minimum_required = minimum_required
