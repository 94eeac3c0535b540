"""Tests for api.py - programmatic scan entry point."""

import os

import pytest

from linescan import Band, scan
from linescan.exceptions import InvalidPathError


class TestScan:
    def test_reference_scenario(self, js_tree):
        report = scan(str(js_tree), ["js"], low=100, high=300)

        bands = {os.path.basename(r.path): r.band for r in report.results}
        assert bands == {"a.js": Band.LOW, "b.js": Band.MEDIUM, "c.js": Band.HIGH}
        assert report.summary.total_files == 3
        assert report.summary.total_lines == 550
        assert f"{report.summary.average_lines:.1f}" == "183.3"

    def test_no_matches_returns_none(self, empty_dir):
        assert scan(str(empty_dir), ["js"]) is None

    def test_idempotent(self, js_tree):
        assert scan(str(js_tree), ["js", "md"]) == scan(str(js_tree), ["js", "md"])

    def test_boundaries(self, tmp_path, make_lines):
        make_lines(tmp_path / "low_edge.py", 10)
        make_lines(tmp_path / "high_edge.py", 20)
        report = scan(str(tmp_path), ["py"], low=10, high=20)
        bands = {os.path.basename(r.path): r.band for r in report.results}
        assert bands == {"low_edge.py": Band.MEDIUM, "high_edge.py": Band.HIGH}

    def test_invalid_directory(self, tmp_path):
        with pytest.raises(InvalidPathError):
            scan(str(tmp_path / "missing"), ["js"])
