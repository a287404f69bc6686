from __future__ import annotations

"""
Directory Size Service.

Computes the byte size of a file, or the aggregate byte size of every file
reachable below a directory.
"""

import logging
import os

logger = logging.getLogger(__name__)

# Returned instead of raising when the target path does not exist
MISSING_SIZE = -1


def size_of(path: str) -> int:
    """
    Return the size in bytes of the object at ``path``.

    - Missing path: returns ``MISSING_SIZE`` (-1); callers must check for it.
    - File: its own byte size.
    - Directory: the sum of every file reachable through a depth-first walk.
      Directories contribute no bytes themselves and an empty tree sums to 0.

    The target itself is resolved through symbolic links. Links found while
    walking are measured as links (``lstat``) and linked directories are not
    descended into, so cyclic link graphs terminate.

    Args:
        path: Path to measure.

    Returns:
        int: Size in bytes, or -1 if nothing exists at ``path``.
    """
    if not os.path.exists(path):
        logger.debug(f"Size requested for missing path: '{path}'")
        return MISSING_SIZE

    if not os.path.isdir(path):
        return os.path.getsize(path)

    total = _tree_size(path)
    logger.debug(f"Directory '{path}' totals {total} bytes")
    return total


def _tree_size(dir_path: str) -> int:
    total = 0
    with os.scandir(dir_path) as it:
        for entry in it:
            if entry.is_dir(follow_symlinks=False):
                total += _tree_size(entry.path)
            else:
                total += entry.stat(follow_symlinks=False).st_size
    return total
