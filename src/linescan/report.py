"""Classification, ordering and aggregation of line counts."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .config import ScanConfig
from .exceptions import InsufficientDataError
from .models import Band, FileResult, ScanReport, Summary


def classify(lines: int, low: int, high: int) -> Band:
    """Place a line count into its band.

    ``lines == low`` is MEDIUM and ``lines == high`` is HIGH. When
    ``low > high`` there is no MEDIUM band: anything below ``low`` is LOW,
    everything else HIGH.
    """
    if lines < low:
        return Band.LOW
    if lines < high:
        return Band.MEDIUM
    return Band.HIGH


def summarize(results: Sequence[FileResult]) -> Summary:
    """Aggregate per-band counts and totals.

    Raises:
        InsufficientDataError: If ``results`` is empty
    """
    if not results:
        raise InsufficientDataError("no files to summarize", minimum_required=1)

    band_counts: Dict[Band, int] = {band: 0 for band in Band}
    total_lines = 0
    for result in results:
        band_counts[result.band] += 1
        total_lines += result.lines

    return Summary(
        total_files=len(results),
        total_lines=total_lines,
        band_counts=band_counts,
    )


def build_report(counts: Iterable[Tuple[str, int]], config: ScanConfig) -> ScanReport:
    """Classify ``(path, lines)`` pairs, sort them and attach a summary.

    Sorting is ascending by line count and stable, so files with equal
    counts keep their discovery order.
    """
    results: List[FileResult] = [
        FileResult(path=path, lines=lines, band=classify(lines, config.low, config.high))
        for path, lines in counts
    ]
    results.sort(key=lambda r: r.lines)

    return ScanReport(
        results=tuple(results),
        summary=summarize(results),
        config=config,
    )
