from __future__ import annotations

"""
Directory Listing Service.

Reads the entries of a directory either one level deep or through a
depth-first walk of every reachable sub-directory. Results are rebuilt from
disk on each call; no listing is ever cached.
"""

import logging
import os
from typing import List, Tuple

from npmfs.domain.element_models import Dirents, EntryKind
from npmfs.domain.errors import PathDoesNotExistError, TypeMismatchError

logger = logging.getLogger(__name__)

_Entry = Tuple[str, str]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def read_dir(path: str, kind: EntryKind = EntryKind.BOTH, recursive: bool = False) -> Dirents:
    """
    List the entries of the directory at ``path``.

    Entry kinds are checked per entry without following symbolic links, so a
    link is reported only when ``kind`` is BOTH and is never descended into
    during a recursive walk.

    In recursive mode every sub-directory is walked before its own entry is
    emitted (post-order). The root directory itself is never part of the
    result.

    Args:
        path: Absolute path of the directory to read.
        kind: Which entries to keep (files, directories or both).
        recursive: Walk all sub-directories instead of the first level only.

    Returns:
        Dirents: Names and absolute paths of the selected entries.

    Raises:
        PathDoesNotExistError: If nothing exists at ``path``.
        TypeMismatchError: If ``path`` is not a directory.
    """
    _ensure_directory(path)
    kind = EntryKind(kind)

    if recursive:
        entries = _walk(path, kind)
    else:
        entries = [
            (name, entry_path)
            for name, entry_path, is_dir, is_file in _scan(path)
            if _selected(kind, is_dir, is_file)
        ]

    logger.debug(f"Read {len(entries)} {kind.value} entries from '{path}' (recursive={recursive})")
    return Dirents(
        root=path,
        names=tuple(name for name, _ in entries),
        paths=tuple(entry_path for _, entry_path in entries),
    )


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_directory(path: str) -> None:
    if not os.path.lexists(path):
        raise PathDoesNotExistError(f"path does not exist: '{path}'", path)
    if not os.path.isdir(path):
        raise TypeMismatchError(f"path does not point to a directory: '{path}'", path)


def _scan(path: str) -> List[Tuple[str, str, bool, bool]]:
    """Read one directory level, sorted by name."""
    with os.scandir(path) as it:
        rows = [
            (
                entry.name,
                os.path.join(path, entry.name),
                entry.is_dir(follow_symlinks=False),
                entry.is_file(follow_symlinks=False),
            )
            for entry in it
        ]
    rows.sort(key=lambda row: row[0])
    return rows


def _selected(kind: EntryKind, is_dir: bool, is_file: bool) -> bool:
    if kind is EntryKind.FILE:
        return is_file
    if kind is EntryKind.DIRECTORY:
        return is_dir
    return True


def _walk(path: str, kind: EntryKind) -> List[_Entry]:
    """Depth-first collection of every entry below ``path``."""
    collected: List[_Entry] = []
    for name, entry_path, is_dir, is_file in _scan(path):
        if is_dir:
            collected.extend(_walk(entry_path, kind))
        if _selected(kind, is_dir, is_file):
            collected.append((name, entry_path))
    return collected
