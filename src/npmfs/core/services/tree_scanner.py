from __future__ import annotations

"""
Upward Directory Tree Scanner.

Walks from a starting directory towards the filesystem root looking for the
directories that contain a given file or directory name. Typical use is
locating the package root (the nearest directory holding 'package.json')
from anywhere inside a project.
"""

import logging
import os
from typing import Iterator, List, Optional

from npmfs.domain.element_models import EntryKind
from npmfs.domain.errors import BlankPathError, PathDoesNotExistError, TypeMismatchError
from npmfs.infra.fs import normalize_path
from npmfs.utils.collation import base_equals

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# QUERY OBJECT
# -----------------------------------------------------------------------------

class DirTreeScan:
    """
    Query handle returned by :func:`scan_dir_tree`.

    Each query re-reads the ancestors on demand; nothing is memoized.
    """

    def __init__(self, start_dir: str):
        self.start_dir = start_dir

    def file(self, name: str, case_sensitive: bool = True) -> Optional[str]:
        """Return the nearest ancestor directory containing file ``name``."""
        return next(self._matches(name, EntryKind.FILE, case_sensitive), None)

    def directory(self, name: str, case_sensitive: bool = True) -> Optional[str]:
        """Return the nearest ancestor directory containing directory ``name``."""
        return next(self._matches(name, EntryKind.DIRECTORY, case_sensitive), None)

    def files(self, name: str, case_sensitive: bool = True) -> List[str]:
        """Return every ancestor directory containing file ``name``, nearest first."""
        return list(self._matches(name, EntryKind.FILE, case_sensitive))

    def directories(self, name: str, case_sensitive: bool = True) -> List[str]:
        """Return every ancestor directory containing directory ``name``, nearest first."""
        return list(self._matches(name, EntryKind.DIRECTORY, case_sensitive))

    def _matches(self, name: str, kind: EntryKind, case_sensitive: bool) -> Iterator[str]:
        for directory in _ancestors(self.start_dir):
            if _holds(directory, name, kind, case_sensitive):
                logger.debug(f"Found {kind.value.lower()} '{name}' in '{directory}'")
                yield directory


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_dir_tree(dir_path: str) -> DirTreeScan:
    """
    Begin an upward scan starting at ``dir_path``.

    Args:
        dir_path: Directory to start from (inclusive).

    Returns:
        DirTreeScan: Handle exposing file/directory queries.

    Raises:
        BlankPathError: If ``dir_path`` is blank.
        PathDoesNotExistError: If ``dir_path`` does not exist.
        TypeMismatchError: If ``dir_path`` is a symlink or not a directory.
    """
    if not dir_path or not dir_path.strip():
        raise BlankPathError("empty directory path argument")

    path = normalize_path(dir_path)
    if not os.path.lexists(path):
        raise PathDoesNotExistError(f"path does not exist: '{path}'", path)
    if os.path.islink(path):
        raise TypeMismatchError(f"path points to a symlinked directory: '{path}'", path)
    if not os.path.isdir(path):
        raise TypeMismatchError(f"path does not point to a directory: '{path}'", path)

    return DirTreeScan(path)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ancestors(start: str) -> Iterator[str]:
    current = start
    while True:
        yield current
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent


def _holds(directory: str, name: str, kind: EntryKind, case_sensitive: bool) -> bool:
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if kind is EntryKind.FILE and not entry.is_file(follow_symlinks=False):
                    continue
                if kind is EntryKind.DIRECTORY and not entry.is_dir(follow_symlinks=False):
                    continue
                if entry.name == name or (not case_sensitive and base_equals(entry.name, name)):
                    return True
    except PermissionError:
        logger.warning(f"Skipping unreadable directory during scan: '{directory}'")
    return False
