from __future__ import annotations

"""
Filesystem Element Base.

Holds the construction contract shared by every element: path validation,
existence/type checks against the live filesystem and derivation of the
immutable path properties. An element never tracks the disk after it has been
built; every query method re-reads the filesystem when called.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional, Union

from npmfs.domain.element_models import ElementType
from npmfs.domain.errors import (
    BlankPathError,
    MissingStatusError,
    PathAlreadyExistsError,
    PathDoesNotExistError,
    TypeMismatchError,
)
from npmfs.infra.fs import inode_of, kind_of, normalize_path

logger = logging.getLogger(__name__)

ElementTypeLike = Union[ElementType, str]
PathLike = Union[str, os.PathLike]


# ==============================================================================
# ELEMENT CONTRACT
# ==============================================================================

class Element(ABC):
    """
    Path-addressed handle on a file or directory, real or virtual.

    Subclasses fix the element type; this base class performs the
    validation every element shares.

    Attributes:
        path: Absolute, normalized path of the element.
        name: Basename of the path.
        parent: Directory containing the element.
        element_type: FILE, DIRECTORY or OTHER.
    """

    __slots__ = ("_path", "_name", "_parent", "_element_type")

    def __init__(
            self,
            path: PathLike,
            *more_paths: PathLike,
            exists: Optional[bool] = None,
            element_type: Optional[ElementTypeLike] = None,
    ):
        """
        Validate the path against the live filesystem and freeze the element.

        Args:
            path: Absolute or relative path of the element (str or path-like).
            *more_paths: Segments appended to ``path``.
            exists: Whether the path must (True) or must not (False) exist.
            element_type: Declared kind of the element.

        Raises:
            BlankPathError: If ``path`` is empty or whitespace only.
            MissingStatusError: If neither ``exists`` nor ``element_type`` is given.
            PathDoesNotExistError: If ``exists`` is True and nothing is at the path.
            TypeMismatchError: If the on-disk kind differs from ``element_type``.
            PathAlreadyExistsError: If ``exists`` is False and the path is taken.
        """
        if path is None or not os.fspath(path).strip():
            raise BlankPathError("blank element path")
        if exists is None and element_type is None:
            raise MissingStatusError("element missing exists and element type properties")

        declared = ElementType(element_type.upper()) if isinstance(element_type, str) else element_type
        resolved = normalize_path(path, *more_paths)
        actual = kind_of(resolved)

        if exists is True and actual is None:
            raise PathDoesNotExistError(f"path does not exist: '{resolved}'", resolved)
        if exists is True and declared is not None and actual is not declared:
            raise TypeMismatchError(
                f"existing {declared.value.lower()} element path points to a "
                f"{actual.value.lower()}: '{resolved}'",
                resolved,
            )
        if exists is False and actual is not None:
            raise PathAlreadyExistsError(f"virtual element path already exists: '{resolved}'", resolved)

        self._path = resolved
        self._name = os.path.basename(resolved)
        self._parent = os.path.dirname(resolved)
        self._element_type = declared or actual or ElementType.OTHER

        logger.debug(f"Built {self._element_type.value} element for '{resolved}' (exists={exists})")

    # --------------------------------------------------------------------------
    # Identity
    # --------------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> str:
        return self._parent

    @property
    def element_type(self) -> ElementType:
        return self._element_type

    # --------------------------------------------------------------------------
    # Live queries
    # --------------------------------------------------------------------------

    def exists(self) -> bool:
        """Return True if something currently exists at this element's path."""
        return kind_of(self._path) is not None

    def inode(self) -> int:
        """
        Return the inode number of the object at this element's path.

        Raises:
            PathDoesNotExistError: If the path no longer exists.
        """
        try:
            return inode_of(self._path)
        except FileNotFoundError as e:
            raise PathDoesNotExistError(f"path does not exist: '{self._path}'", self._path) from e

    @abstractmethod
    def length(self) -> int:
        """Entry count for directories, line count for files."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the element holds no data."""

    @abstractmethod
    def size(self) -> int:
        """Size in bytes, or -1 if the path does not exist."""

    # --------------------------------------------------------------------------
    # Dunder helpers
    # --------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return type(self) is type(other) and self._path == other._path

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, type={self._element_type.value})"
