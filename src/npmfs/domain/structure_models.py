from __future__ import annotations

"""
Project Structure Domain Data Models.

Defines the report produced when a package root is checked against its
declared shape, plus factory functions for the default npm package layout.
Defaults are returned as fresh values on every call; nothing here is shared
process-wide state.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from npmfs.domain.element_models import DirContents

# -----------------------------------------------------------------------------
# DEFAULT LAYOUT
# -----------------------------------------------------------------------------

DEFAULT_MANIFEST_NAME = "package.json"

_NPM_REQUIRED_DIRS: Tuple[str, ...] = ()
_NPM_REQUIRED_FILES: Tuple[str, ...] = (DEFAULT_MANIFEST_NAME,)
_NPM_OPTIONAL_DIRS: Tuple[str, ...] = ("node_modules", ".git")
_NPM_OPTIONAL_FILES: Tuple[str, ...] = (
    "package-lock.json",
    "README.md",
    "LICENSE",
    ".gitignore",
)
_NPM_REQUIRED_MANIFEST_KEYS: Tuple[str, ...] = ("name", "version")


def default_npm_structure() -> Tuple[DirContents, DirContents]:
    """
    Build the (required, optional) shape of an npm package root.

    Returns:
        Tuple[DirContents, DirContents]: Required and optional contents.
    """
    required = DirContents(_NPM_REQUIRED_DIRS, _NPM_REQUIRED_FILES)
    optional = DirContents(_NPM_OPTIONAL_DIRS, _NPM_OPTIONAL_FILES)
    return required, optional


def default_manifest_keys() -> List[str]:
    """Top-level keys every npm manifest is expected to declare."""
    return list(_NPM_REQUIRED_MANIFEST_KEYS)

# -----------------------------------------------------------------------------
# REPORT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureReport:
    """
    Outcome of checking a directory against required/optional contents.

    Attributes:
        path: Absolute path of the checked directory.
        missing_required_dirs: Required directory names not found.
        missing_required_files: Required file names not found.
        missing_optional_dirs: Optional directory names not found.
        missing_optional_files: Optional file names not found.
        missing_manifest_keys: Required manifest keys not declared.
        missing_scripts: Required manifest scripts not declared.
        size_bytes: Aggregate size of the directory, when requested.
    """
    path: str
    missing_required_dirs: List[str] = field(default_factory=list)
    missing_required_files: List[str] = field(default_factory=list)
    missing_optional_dirs: List[str] = field(default_factory=list)
    missing_optional_files: List[str] = field(default_factory=list)
    missing_manifest_keys: List[str] = field(default_factory=list)
    missing_scripts: List[str] = field(default_factory=list)
    size_bytes: int = -1

    @property
    def ok(self) -> bool:
        """True when no required entry, manifest key or script is missing."""
        return not (
            self.missing_required_dirs
            or self.missing_required_files
            or self.missing_manifest_keys
            or self.missing_scripts
        )

    @property
    def missing_optional(self) -> bool:
        return bool(self.missing_optional_dirs or self.missing_optional_files)
