"""JSON output formatter for linescan."""

import json

from ..models import Band, ScanReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Machine-readable report on stdout."""

    def render(self, report: ScanReport) -> None:
        self.console.print(self.format(report), markup=False, highlight=False, soft_wrap=True)

    def format(self, report: ScanReport) -> str:
        summary = report.summary
        data = {
            "directory": report.config.directory,
            "extensions": sorted(report.config.extensions),
            "thresholds": {"low": report.config.low, "high": report.config.high},
            "files": [
                {"path": r.path, "lines": r.lines, "band": r.band.value}
                for r in report.results
            ],
            "summary": {
                "total_files": summary.total_files,
                "total_lines": summary.total_lines,
                "average_lines": round(summary.average_lines, 1),
                "bands": {
                    band.value: {
                        "count": summary.count(band),
                        "percentage": round(summary.percentage(band), 1),
                    }
                    for band in Band
                },
            },
        }
        return json.dumps(data, indent=2)
