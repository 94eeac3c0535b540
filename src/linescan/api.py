"""Public API for linescan.

Example:
    >>> from linescan import scan
    >>>
    >>> report = scan("src", ["py"], low=50, high=200)
    >>> if report is not None:
    ...     print(report.summary.total_lines)
"""

from __future__ import annotations

from typing import Iterable, Optional

from .config import DEFAULT_HIGH_THRESHOLD, DEFAULT_LOW_THRESHOLD, ScanConfig, load_config
from .logging_config import get_logger
from .models import ScanReport
from .report import build_report
from .scanning import count_lines, find_files

logger = get_logger(__name__)


def run_scan(config: ScanConfig) -> Optional[ScanReport]:
    """Find, count and report for an already validated config.

    Returns:
        The report, or None if no file matched the configured extensions
    """
    files = find_files(config.directory, config.extensions)
    if not files:
        logger.info(f"No files with extensions {sorted(config.extensions)} in {config.directory}")
        return None

    counts = [(path, count_lines(path)) for path in files]
    return build_report(counts, config)


def scan(
    directory: str,
    extensions: Iterable[str],
    low: int = DEFAULT_LOW_THRESHOLD,
    high: int = DEFAULT_HIGH_THRESHOLD,
) -> Optional[ScanReport]:
    """Scan ``directory`` and return a line-count report.

    Args:
        directory: Root directory to walk
        extensions: File extensions to include, without the leading dot
        low: Files below this many lines are LOW
        high: Files at or above this many lines are HIGH

    Returns:
        ScanReport, or None when no file matched

    Raises:
        InvalidPathError: If ``directory`` is missing or not a directory
        InvalidConfigError: If ``extensions`` is empty
    """
    config = load_config(directory, extensions, low=low, high=high)
    return run_scan(config)
