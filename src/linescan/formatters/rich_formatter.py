"""Colored terminal formatter: one line per file, totals and summary."""

from typing import List, Tuple

from rich.text import Text

from ..models import Band, ScanReport
from .base import BaseFormatter

COUNT_WIDTH = 6
NEUTRAL_STYLE = "white"


def _report_lines(report: ScanReport) -> List[Tuple[str, str]]:
    """Build ``(text, style)`` pairs for every line of output."""
    summary = report.summary
    low, high = report.config.low, report.config.high

    lines = [
        (f"{result.lines:>{COUNT_WIDTH}} {result.path}", result.band.color)
        for result in report.results
    ]
    lines.append((f"{summary.total_lines:>{COUNT_WIDTH}} total", NEUTRAL_STYLE))
    lines.append(("", ""))
    lines.append(("SUMMARY:", NEUTRAL_STYLE))

    bounds = {
        Band.LOW: f"< {low} lines",
        Band.MEDIUM: f"{low}-{high - 1} lines",
        Band.HIGH: f">= {high} lines",
    }
    for band in Band:
        lines.append(
            (
                f"{summary.count(band)} files ({summary.percentage(band):.1f}%) {bounds[band]}",
                band.color,
            )
        )

    lines.append(
        (
            f"Total: {summary.total_files} files "
            f"({summary.total_lines} lines, {summary.average_lines:.1f} avg)",
            NEUTRAL_STYLE,
        )
    )
    return lines


class RichFormatter(BaseFormatter):
    """Colored listing sorted by line count, followed by a band summary."""

    def render(self, report: ScanReport) -> None:
        for text, style in _report_lines(report):
            # Text objects keep file paths literal: no markup, no highlighting
            self.console.print(Text(text, style=style), soft_wrap=True, highlight=False)

    def format(self, report: ScanReport) -> str:
        return "\n".join(text for text, _ in _report_lines(report))
