"""Tests for the exception hierarchy."""

import pytest

from linescan.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    InsufficientDataError,
    InvalidConfigError,
    InvalidPathError,
    LinescanError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc, parent",
        [
            (InvalidPathError("x", "Directory 'x' does not exist"), ConfigurationError),
            (InvalidConfigError("extensions", [], "At least one file type is required"), ConfigurationError),
            (FileAccessError("a.py", "gone"), AnalysisError),
            (InsufficientDataError("no files"), AnalysisError),
        ],
    )
    def test_subclasses(self, exc, parent):
        assert isinstance(exc, parent)
        assert isinstance(exc, LinescanError)


class TestMessages:
    def test_plain_message(self):
        assert str(LinescanError("boom")) == "boom"

    def test_details_are_appended(self):
        err = LinescanError("boom", details={"a": "1", "b": "2"})
        assert str(err) == "boom (a=1, b=2)"

    def test_invalid_path_message_is_reason(self):
        err = InvalidPathError("src", "'src' is not a directory")
        assert str(err) == "'src' is not a directory"
        assert err.path == "src"

    def test_file_access_error(self):
        err = FileAccessError("a.py", "OS error: denied")
        assert err.filepath == "a.py"
        assert err.details == {"filepath": "a.py", "reason": "OS error: denied"}
        assert str(err).startswith("Cannot access file: a.py")

    def test_insufficient_data_minimum(self):
        err = InsufficientDataError("no files", minimum_required=1)
        assert err.details["minimum_required"] == "1"
