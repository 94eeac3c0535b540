"""Data models for scan results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .config import ScanConfig


class Band(Enum):
    """Size band of a file relative to the configured thresholds."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def color(self) -> str:
        return _BAND_COLORS[self]


_BAND_COLORS = {
    Band.LOW: "green",
    Band.MEDIUM: "yellow",
    Band.HIGH: "red",
}


@dataclass(frozen=True)
class FileResult:
    """Line count and band for a single discovered file."""

    path: str
    lines: int
    band: Band


@dataclass(frozen=True)
class Summary:
    """Aggregate statistics over all FileResults of a scan."""

    total_files: int
    total_lines: int
    band_counts: Dict[Band, int] = field(default_factory=dict)

    def count(self, band: Band) -> int:
        return self.band_counts.get(band, 0)

    def percentage(self, band: Band) -> float:
        """Share of files in ``band``, as a percentage of all files."""
        return self.count(band) / self.total_files * 100

    @property
    def average_lines(self) -> float:
        return self.total_lines / self.total_files


@dataclass(frozen=True)
class ScanReport:
    """Sorted results plus summary for one scan."""

    results: Tuple[FileResult, ...]
    summary: Summary
    config: ScanConfig
