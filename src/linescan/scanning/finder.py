"""Recursive file discovery filtered by extension.

Traversal is depth-first over an explicit work-list so very deep trees do
not grow the call stack. Anything that cannot be listed or stat'ed is
skipped and the walk continues with its siblings.
"""

import os
from typing import AbstractSet, FrozenSet, List, Tuple

from ..logging_config import get_logger

logger = get_logger(__name__)


def file_extension(name: str) -> str:
    """Return the text after the last '.', without the dot.

    Dotfiles such as ``.bashrc`` and names without a dot have no extension.
    """
    return os.path.splitext(name)[1][1:]


def find_files(root: str, extensions: AbstractSet[str]) -> List[str]:
    """Find all files under ``root`` whose extension is in ``extensions``.

    Args:
        root: Directory to walk
        extensions: Extensions without the leading dot; matched exactly
            and case-sensitively

    Returns:
        Paths built by joining ``root`` with entry names. Entries are
        visited in name order, so an unchanged tree always yields the same
        list.
    """
    files: List[str] = []
    # Each item carries the (st_dev, st_ino) keys of its ancestors so a
    # symlink pointing back up the tree is not walked again
    pending: List[Tuple[str, FrozenSet[Tuple[int, int]]]] = [(root, frozenset())]

    while pending:
        current, ancestors = pending.pop()

        try:
            info = os.stat(current)
        except OSError as e:
            logger.debug(f"Skipping directory {current}: {e}")
            continue
        key = (info.st_dev, info.st_ino)
        if key in ancestors:
            logger.debug(f"Skipping symlink cycle at {current}")
            continue
        lineage = ancestors | {key}

        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {current}: {e}")
            continue

        subdirs: List[str] = []
        for entry in entries:
            try:
                if entry.is_dir():
                    subdirs.append(entry.path)
                elif entry.is_file():
                    ext = file_extension(entry.name)
                    if ext and ext in extensions:
                        files.append(entry.path)
            except OSError as e:
                logger.debug(f"Skipping {entry.path}: {e}")
                continue

        # Reversed so the first subdirectory is popped next
        pending.extend((path, lineage) for path in reversed(subdirs))

    logger.debug(f"Found {len(files)} matching files under {root}")
    return files
