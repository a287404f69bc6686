from __future__ import annotations

"""
Directory Structure Validator.

Compares the live contents of a directory with two declared shapes, the
required and the optional entries, and reports what is missing. Declarations
are held as immutable DirContents values; the "add" builders swap in a new
value and return the validator so declarations can be chained.
"""

import logging
from typing import List, Union

from npmfs.core.elements.directory import DirectoryElement
from npmfs.domain.element_models import DirContents
from npmfs.domain.structure_models import StructureReport

logger = logging.getLogger(__name__)


class StructureValidator:
    """
    Required/optional entry checker for one directory.

    Containment is case-insensitive and one level deep: a declared name is
    satisfied by an immediate entry of the same kind whose name matches
    ignoring case and accents.
    """

    def __init__(
            self,
            directory: Union[DirectoryElement, str],
            required: DirContents = DirContents(),
            optional: DirContents = DirContents(),
    ):
        """
        Args:
            directory: Directory element, or path of an existing directory.
            required: Entries that must be present.
            optional: Entries that may be present.
        """
        self._directory = directory if isinstance(directory, DirectoryElement) else DirectoryElement(directory)
        self._required = required
        self._optional = optional

    # --------------------------------------------------------------------------
    # Declarations
    # --------------------------------------------------------------------------

    @property
    def directory(self) -> DirectoryElement:
        return self._directory

    @property
    def required(self) -> DirContents:
        return self._required

    @property
    def optional(self) -> DirContents:
        return self._optional

    def add_required_dirs(self, *names: str) -> StructureValidator:
        self._required = self._required.with_directories(*names)
        return self

    def add_required_files(self, *names: str) -> StructureValidator:
        self._required = self._required.with_files(*names)
        return self

    def add_optional_dirs(self, *names: str) -> StructureValidator:
        self._optional = self._optional.with_directories(*names)
        return self

    def add_optional_files(self, *names: str) -> StructureValidator:
        self._optional = self._optional.with_files(*names)
        return self

    # --------------------------------------------------------------------------
    # Missing entries
    # --------------------------------------------------------------------------

    def missing_required_dirs(self) -> List[str]:
        present = self._directory.directories()
        return [n for n in self._required.directories if not present.contains_name(n)]

    def missing_required_files(self) -> List[str]:
        present = self._directory.files()
        return [n for n in self._required.files if not present.contains_name(n)]

    def missing_optional_dirs(self) -> List[str]:
        present = self._directory.directories()
        return [n for n in self._optional.directories if not present.contains_name(n)]

    def missing_optional_files(self) -> List[str]:
        present = self._directory.files()
        return [n for n in self._optional.files if not present.contains_name(n)]

    # --------------------------------------------------------------------------
    # Predicates
    # --------------------------------------------------------------------------

    def is_missing_required(self) -> bool:
        return self.is_missing_required_dir() or self.is_missing_required_file()

    def is_missing_required_dir(self) -> bool:
        return len(self.missing_required_dirs()) != 0

    def is_missing_required_file(self) -> bool:
        return len(self.missing_required_files()) != 0

    def is_missing_optional(self) -> bool:
        return self.is_missing_optional_dir() or self.is_missing_optional_file()

    def is_missing_optional_dir(self) -> bool:
        return len(self.missing_optional_dirs()) != 0

    def is_missing_optional_file(self) -> bool:
        return len(self.missing_optional_files()) != 0

    # --------------------------------------------------------------------------
    # Reporting
    # --------------------------------------------------------------------------

    def report(self) -> StructureReport:
        """Snapshot every missing list into a single report."""
        report = StructureReport(
            path=self._directory.path,
            missing_required_dirs=self.missing_required_dirs(),
            missing_required_files=self.missing_required_files(),
            missing_optional_dirs=self.missing_optional_dirs(),
            missing_optional_files=self.missing_optional_files(),
        )
        if not report.ok:
            logger.debug(
                f"'{report.path}' is missing required entries: "
                f"dirs={report.missing_required_dirs} files={report.missing_required_files}"
            )
        return report

    def __str__(self) -> str:
        def fmt(label: str, names) -> str:
            return f"{label}: [{', '.join(repr(n) for n in names)}]"

        rows = [
            fmt("files", self._directory.file_names()),
            fmt("directories", self._directory.dir_names()),
            fmt("required files", self._required.files),
            fmt("required directories", self._required.directories),
            fmt("optional files", self._optional.files),
            fmt("optional directories", self._optional.directories),
        ]
        return "{\n  " + ",\n  ".join(rows) + "\n}"
