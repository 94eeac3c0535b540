"""Line counting for discovered files."""

from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)


def read_text(
    filepath: str,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """
    Read a whole file as text.

    Undecodable bytes are replaced rather than rejected, and newline
    translation is disabled so ``\\r\\n`` and lone ``\\r`` are kept as-is.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def count_lines(filepath: str) -> int:
    """
    Count the '\\n'-separated segments of a file.

    A file without a trailing newline still counts its last partial line,
    and an empty file counts as 1. Unreadable files count as 0.
    """
    try:
        content = read_text(filepath)
    except FileAccessError as e:
        logger.debug(f"{e}")
        return 0
    return content.count("\n") + 1
