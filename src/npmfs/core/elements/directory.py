from __future__ import annotations

"""
Directory Element.

Element specialization for directories: enumeration of child entries,
containment queries and aggregate size. Every query re-reads the directory
from disk so results reflect the filesystem at call time.
"""

from typing import List

from npmfs.core.elements.base import Element
from npmfs.core.services.dir_reader import read_dir
from npmfs.core.services.dir_size import size_of
from npmfs.domain.element_models import Dirents, ElementType, EntryKind
from npmfs.domain.errors import PathDoesNotExistError
from npmfs.infra.fs import file_url_to_path, kind_of


class DirectoryElement(Element):
    """
    Handle on a directory, existing by default or virtual when
    ``exists=False``.

    Listing a virtual directory (or one removed since construction) raises
    :class:`PathDoesNotExistError`; check :meth:`exists` first when that
    matters.
    """

    __slots__ = ()

    def __init__(self, path: str, *more_paths: str, exists: bool = True):
        super().__init__(path, *more_paths, exists=exists, element_type=ElementType.DIRECTORY)

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------

    @classmethod
    def of(cls, path: str, *more_paths: str) -> DirectoryElement:
        """Build an existing directory element from one or more path segments."""
        return cls(path, *more_paths)

    @classmethod
    def of_url(cls, directory_url: str) -> DirectoryElement:
        """Build an existing directory element from a ``file://`` URL."""
        return cls(file_url_to_path(directory_url))

    # --------------------------------------------------------------------------
    # Listing
    # --------------------------------------------------------------------------

    def entries(self, kind: EntryKind = EntryKind.BOTH, recursive: bool = False) -> Dirents:
        """
        List the entries of this directory.

        Args:
            kind: FILE, DIRECTORY or BOTH.
            recursive: Include everything below this directory, depth-first.

        Returns:
            Dirents: Names, absolute paths and count of the selected entries.

        Raises:
            PathDoesNotExistError: If the directory is not on disk.
        """
        if kind_of(self.path) is None:
            raise PathDoesNotExistError(f"directory does not exist: '{self.path}'", self.path)
        return read_dir(self.path, kind, recursive)

    def files(self, recursive: bool = False) -> Dirents:
        return self.entries(EntryKind.FILE, recursive)

    def directories(self, recursive: bool = False) -> Dirents:
        return self.entries(EntryKind.DIRECTORY, recursive)

    def file_names(self) -> List[str]:
        return list(self.files().names)

    def dir_names(self) -> List[str]:
        return list(self.directories().names)

    def entry_names(self) -> List[str]:
        return list(self.entries().names)

    # --------------------------------------------------------------------------
    # Containment
    # --------------------------------------------------------------------------

    def contains(
            self,
            name_or_path: str,
            case_sensitive: bool = False,
            kind: EntryKind = EntryKind.BOTH,
            recursive: bool = False,
    ) -> bool:
        """
        Check whether an entry matching a name or path is present.

        The query is compared against entry names and against entry paths
        (absolute, or relative to this directory). By default the comparison
        ignores case and accents.

        Args:
            name_or_path: Entry name, absolute path or relative path.
            case_sensitive: Require an exact match.
            kind: Restrict the search to files or directories.
            recursive: Search the whole tree below this directory.

        Returns:
            bool: True if a matching entry exists right now.
        """
        return self.entries(kind, recursive).contains(name_or_path, case_sensitive)

    def contains_file(self, name_or_path: str, case_sensitive: bool = False, recursive: bool = False) -> bool:
        return self.contains(name_or_path, case_sensitive, EntryKind.FILE, recursive)

    def contains_dir(self, name_or_path: str, case_sensitive: bool = False, recursive: bool = False) -> bool:
        return self.contains(name_or_path, case_sensitive, EntryKind.DIRECTORY, recursive)

    # --------------------------------------------------------------------------
    # Element capabilities
    # --------------------------------------------------------------------------

    def length(self) -> int:
        """Number of immediate entries."""
        return self.entries().count

    def is_empty(self) -> bool:
        return self.length() == 0

    def size(self) -> int:
        """Total bytes of every file below this directory, -1 if missing."""
        return size_of(self.path)

    def __str__(self) -> str:
        lines = [f"DirectoryElement: {self.path}"]
        if self.exists():
            listing = self.entries()
            lines.append(f"entries ({listing.count}):")
            lines.extend(f"  {name}" for name in listing.names)
        else:
            lines.append("(virtual)")
        return "\n".join(lines)
