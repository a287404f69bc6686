from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin, synchronous wrappers over 'os' used by the element layer: path
normalization, live kind inspection, file URL conversion and whole-file
reads. Nothing here caches; every call hits the disk.
"""

import os
import stat
from typing import Optional, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from npmfs.domain.element_models import ElementType

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Union[str, os.PathLike], *more_paths: Union[str, os.PathLike]) -> str:
    """
    Join and normalize path segments into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Blank input is not special-cased here; callers validate
    it before resolution.

    Args:
        path: Leading path segment (str or path-like).
        *more_paths: Additional segments appended with the OS separator.

    Returns:
        str: Normalized absolute path.
    """
    head = os.fspath(path).strip()
    joined = os.path.join(head, *(os.fspath(p) for p in more_paths)) if more_paths else head
    expanded = os.path.expandvars(os.path.expanduser(joined))
    return os.path.abspath(expanded)


def file_url_to_path(url: str) -> str:
    """
    Convert a ``file://`` URL into a local filesystem path.

    Args:
        url: URL using the file scheme.

    Returns:
        str: Local path the URL designates.

    Raises:
        ValueError: If the URL uses a scheme other than ``file``.
    """
    parsed = urlparse(url)
    if parsed.scheme != "file":
        raise ValueError(f"not a file URL: '{url}'")
    return url2pathname(unquote(parsed.path))

# -----------------------------------------------------------------------------
# INSPECTION API
# -----------------------------------------------------------------------------

def kind_of(path: str) -> Optional[ElementType]:
    """
    Inspect the live kind of the object at ``path``.

    Symbolic links are followed, so a link to a directory reports DIRECTORY.

    Args:
        path: Absolute path to inspect.

    Returns:
        Optional[ElementType]: The kind, or None if nothing exists there.
    """
    try:
        mode = os.stat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None

    if stat.S_ISREG(mode):
        return ElementType.FILE
    if stat.S_ISDIR(mode):
        return ElementType.DIRECTORY
    return ElementType.OTHER


def inode_of(path: str) -> int:
    """Return the inode number of ``path`` without following symlinks."""
    return os.lstat(path).st_ino


def read_text(path: str) -> str:
    """
    Read a whole file as text.

    Newlines are preserved exactly as stored so that line splitting on
    ``\\n`` stays faithful to the bytes on disk. Undecodable bytes (binary
    or non-UTF-8 files) are replaced with U+FFFD instead of failing.

    Args:
        path: Absolute path to a regular file.

    Returns:
        str: The decoded file contents.
    """
    with open(path, "r", encoding=DEFAULT_ENCODING, errors="replace", newline="") as f:
        return f.read()
