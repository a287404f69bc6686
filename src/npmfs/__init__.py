from __future__ import annotations

"""
npmfs: filesystem elements and npm package structure checks.

Files and directories are wrapped in element objects validated against the
disk at construction; directories can be listed, searched and measured, and
a StructureValidator reports which declared entries a package root lacks.
"""

from npmfs.core.elements.base import Element
from npmfs.core.elements.directory import DirectoryElement
from npmfs.core.elements.file import FileElement
from npmfs.core.elements.json_file import JSONFile
from npmfs.core.services.dir_reader import read_dir
from npmfs.core.services.dir_size import MISSING_SIZE, size_of
from npmfs.core.services.tree_scanner import DirTreeScan, scan_dir_tree
from npmfs.core.structure.checker import check_project
from npmfs.core.structure.validator import StructureValidator
from npmfs.domain.element_models import DirContents, Dirents, ElementType, EntryKind
from npmfs.domain.errors import (
    BlankPathError,
    ElementError,
    JSONFileParseError,
    MissingStatusError,
    PathAlreadyExistsError,
    PathDoesNotExistError,
    TypeMismatchError,
)
from npmfs.domain.structure_models import StructureReport

__version__ = "1.0.0"

__all__ = [
    "BlankPathError",
    "DirContents",
    "DirTreeScan",
    "Dirents",
    "DirectoryElement",
    "Element",
    "ElementError",
    "ElementType",
    "EntryKind",
    "FileElement",
    "JSONFile",
    "JSONFileParseError",
    "MISSING_SIZE",
    "MissingStatusError",
    "PathAlreadyExistsError",
    "PathDoesNotExistError",
    "StructureReport",
    "StructureValidator",
    "TypeMismatchError",
    "check_project",
    "read_dir",
    "scan_dir_tree",
    "size_of",
]
