"""Shared test fixtures for linescan."""

from pathlib import Path

import pytest


def write_lines(path: Path, count: int, trailing_newline: bool = False) -> Path:
    """Write a file with exactly ``count`` newline-separated lines."""
    path.parent.mkdir(parents=True, exist_ok=True)
    content = "\n".join(f"line {i}" for i in range(count))
    if trailing_newline:
        content += "\n"
    path.write_text(content)
    return path


@pytest.fixture
def js_tree(tmp_path):
    """a.js (50), b.js (150), c.js (350) plus non-matching files."""
    write_lines(tmp_path / "a.js", 50)
    write_lines(tmp_path / "sub" / "b.js", 150)
    write_lines(tmp_path / "sub" / "deeper" / "c.js", 350)
    write_lines(tmp_path / "notes.md", 10)
    write_lines(tmp_path / "sub" / "README", 5)
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path):
    """Directory with no matching files."""
    target = tmp_path / "empty"
    target.mkdir()
    return target


@pytest.fixture
def make_lines():
    """Factory writing files with a given number of lines."""
    return write_lines
