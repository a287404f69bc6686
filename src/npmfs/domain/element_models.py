from __future__ import annotations

"""
Element Domain Data Models.

Provides the enumerations and immutable value objects shared by the element
layer: element kinds, listing filters, declared directory shapes and the
results of a directory listing.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from npmfs.utils.collation import base_equals

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class ElementType(str, Enum):
    """Kind of filesystem object an element represents."""
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    OTHER = "OTHER"


class EntryKind(str, Enum):
    """Filter applied when listing the entries of a directory."""
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    BOTH = "BOTH"


# -----------------------------------------------------------------------------
# DIRECTORY SHAPE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirContents:
    """
    Declared (or observed) shape of a directory.

    Attributes:
        directories: Names of sub-directories.
        files: Names of files.
    """
    directories: Tuple[str, ...] = ()
    files: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable on construction while keeping the value hashable
        object.__setattr__(self, "directories", tuple(self.directories))
        object.__setattr__(self, "files", tuple(self.files))

    def with_directories(self, *names: str) -> DirContents:
        """Return a copy with ``names`` appended to the directory names."""
        return DirContents(self.directories + tuple(names), self.files)

    def with_files(self, *names: str) -> DirContents:
        """Return a copy with ``names`` appended to the file names."""
        return DirContents(self.directories, self.files + tuple(names))


# -----------------------------------------------------------------------------
# LISTING RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Dirents:
    """
    Result of reading a directory.

    Names and paths are index-aligned: ``paths[i]`` is the absolute path of
    the entry called ``names[i]``.

    Attributes:
        root: Absolute path of the directory that was read.
        names: Entry basenames.
        paths: Entry absolute paths.
    """
    root: str
    names: Tuple[str, ...] = ()
    paths: Tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.paths)

    def contains_name(self, name: str, case_sensitive: bool = False) -> bool:
        """
        Check whether an entry with the given basename was listed.

        Args:
            name: Basename to look for.
            case_sensitive: If False, names differing only by case or
                accents are considered equal.

        Returns:
            bool: True if a matching entry exists.
        """
        if case_sensitive:
            return name in self.names
        return any(base_equals(name, n) for n in self.names)

    def contains_path(self, path: str, case_sensitive: bool = False) -> bool:
        """
        Check whether an entry with the given path was listed.

        ``path`` may be absolute or relative to :attr:`root`.
        """
        if os.path.isabs(path):
            candidates = [os.path.normpath(p) for p in self.paths]
            query = os.path.normpath(path)
        else:
            candidates = [os.path.relpath(p, self.root) for p in self.paths]
            query = os.path.normpath(path)

        if case_sensitive:
            return query in candidates
        return any(base_equals(query, c) for c in candidates)

    def contains(self, query: str, case_sensitive: bool = False) -> bool:
        """Match ``query`` against entry names first, then entry paths."""
        return (
            self.contains_name(query, case_sensitive)
            or self.contains_path(query, case_sensitive)
        )
