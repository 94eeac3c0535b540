"""Scan configuration for linescan.

The command line is turned into a single frozen ``ScanConfig`` which is then
passed explicitly to the finder, the report builder and the formatters.

Example:
    >>> config = load_config("src", ["py"], low=50)
    >>> config.low, config.high
    (50, 300)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .exceptions import InvalidConfigError, InvalidPathError

DEFAULT_LOW_THRESHOLD = 100
DEFAULT_HIGH_THRESHOLD = 300


@dataclass(frozen=True)
class ScanConfig:
    """Validated inputs for one scan.

    Attributes:
        directory: Root directory to walk, as given on the command line
        extensions: Extensions to include, without the leading dot
        low: Files below this many lines are LOW
        high: Files at or above this many lines are HIGH

    ``low <= high`` is not enforced; classification stays well defined
    when the thresholds are swapped.
    """

    directory: str
    extensions: FrozenSet[str]
    low: int = DEFAULT_LOW_THRESHOLD
    high: int = DEFAULT_HIGH_THRESHOLD

    def __post_init__(self) -> None:
        if not self.extensions:
            raise InvalidConfigError(
                "extensions", self.extensions, "At least one file type is required"
            )


def load_config(
    directory: Optional[str],
    extensions: Optional[Iterable[str]],
    low: int = DEFAULT_LOW_THRESHOLD,
    high: int = DEFAULT_HIGH_THRESHOLD,
) -> ScanConfig:
    """Validate raw inputs and build a ScanConfig.

    Checks run in the order the command line is read: directory given,
    directory exists, directory is a directory, then extensions non-empty.

    Raises:
        InvalidConfigError: If no directory or no extension was given
        InvalidPathError: If the directory is missing or not a directory
    """
    if not directory:
        raise InvalidConfigError("directory", directory, "Directory is required")

    if not os.path.exists(directory):
        raise InvalidPathError(directory, f"Directory '{directory}' does not exist")
    if not os.path.isdir(directory):
        raise InvalidPathError(directory, f"'{directory}' is not a directory")

    return ScanConfig(
        directory=directory,
        extensions=frozenset(extensions or ()),
        low=low,
        high=high,
    )
