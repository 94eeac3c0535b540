"""Configuration exceptions: target paths and option values."""

from typing import Any

from .base import LinescanError


class ConfigurationError(LinescanError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when the target directory is missing or not a directory."""

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(reason)
        self.key = key
        self.value = value
        self.reason = reason
