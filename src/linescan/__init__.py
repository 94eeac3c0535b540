"""
linescan - line counts by file, banded by size

Recursively finds files by extension, counts their lines and prints a
sorted, color-coded report with a per-band summary.
"""

__version__ = "0.1.0"

from .api import run_scan, scan
from .config import ScanConfig, load_config
from .models import Band, FileResult, ScanReport, Summary

__all__ = [
    "scan",
    "run_scan",
    "load_config",
    "ScanConfig",
    "ScanReport",
    "FileResult",
    "Summary",
    "Band",
]
