"""Tests for config.py - ScanConfig validation."""

import dataclasses

import pytest

from linescan.config import (
    DEFAULT_HIGH_THRESHOLD,
    DEFAULT_LOW_THRESHOLD,
    ScanConfig,
    load_config,
)
from linescan.exceptions import ConfigurationError, InvalidConfigError, InvalidPathError


class TestLoadConfig:
    """Test load_config function."""

    def test_defaults(self, tmp_path):
        config = load_config(str(tmp_path), ["ts", "tsx"])
        assert config.directory == str(tmp_path)
        assert config.extensions == frozenset({"ts", "tsx"})
        assert config.low == DEFAULT_LOW_THRESHOLD == 100
        assert config.high == DEFAULT_HIGH_THRESHOLD == 300

    def test_duplicate_extensions_collapse(self, tmp_path):
        config = load_config(str(tmp_path), ["js", "js"])
        assert config.extensions == frozenset({"js"})

    def test_custom_thresholds(self, tmp_path):
        config = load_config(str(tmp_path), ["js"], low=50, high=200)
        assert (config.low, config.high) == (50, 200)

    def test_swapped_thresholds_allowed(self, tmp_path):
        config = load_config(str(tmp_path), ["js"], low=500, high=10)
        assert config.low > config.high

    def test_missing_directory_argument(self):
        with pytest.raises(InvalidConfigError, match="Directory is required"):
            load_config(None, ["js"])

    def test_nonexistent_directory(self, tmp_path):
        missing = str(tmp_path / "nope")
        with pytest.raises(InvalidPathError) as exc_info:
            load_config(missing, ["js"])
        assert missing in str(exc_info.value)
        assert "does not exist" in str(exc_info.value)

    def test_not_a_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(InvalidPathError, match="is not a directory"):
            load_config(str(path), ["js"])

    def test_empty_extensions(self, tmp_path):
        with pytest.raises(InvalidConfigError, match="At least one file type is required"):
            load_config(str(tmp_path), [])

    def test_none_extensions(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path), None)

    def test_path_checked_before_extensions(self, tmp_path):
        with pytest.raises(InvalidPathError):
            load_config(str(tmp_path / "nope"), [])


class TestScanConfig:
    def test_frozen(self):
        config = ScanConfig(directory=".", extensions=frozenset({"py"}))
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.low = 1
