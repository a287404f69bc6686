from __future__ import annotations

"""
File Element.

Element specialization for regular files. The text content is captured once
at construction (a snapshot); only :meth:`FileElement.read` goes back to disk
for fresh content.
"""

import os
import re
from typing import List

from npmfs.core.elements.base import Element
from npmfs.domain.element_models import ElementType
from npmfs.infra.fs import read_text


class FileElement(Element):
    """Handle on a text file, existing by default or virtual when ``exists=False``."""

    __slots__ = ("_text",)

    def __init__(self, path: str, *more_paths: str, exists: bool = True):
        super().__init__(path, *more_paths, exists=exists, element_type=ElementType.FILE)
        self._text = read_text(self.path) if exists else ""

    # --------------------------------------------------------------------------
    # Content
    # --------------------------------------------------------------------------

    @property
    def text(self) -> str:
        """Content snapshot taken at construction."""
        return self._text

    def read(self) -> str:
        """Read the current content from disk, bypassing the snapshot."""
        return read_text(self.path)

    def lines(self) -> List[str]:
        """Split the snapshot on ``\\n`` (``\\r`` characters are kept)."""
        return self._text.split("\n")

    # --------------------------------------------------------------------------
    # Search
    # --------------------------------------------------------------------------

    def contains(self, substring: str, case_sensitive: bool = False) -> bool:
        """
        Literal substring search over the snapshot.

        Regex metacharacters in ``substring`` have no special meaning; use
        :meth:`search` for pattern matching.
        """
        if case_sensitive:
            return substring in self._text
        return substring.casefold() in self._text.casefold()

    def search(self, pattern: str, case_sensitive: bool = False) -> bool:
        """
        Regular expression search over the snapshot.

        Args:
            pattern: Pattern in Python ``re`` syntax.
            case_sensitive: Disable IGNORECASE when True.

        Returns:
            bool: True if the pattern matches anywhere.

        Raises:
            re.error: If ``pattern`` is not a valid expression.
        """
        flags = re.MULTILINE if case_sensitive else re.MULTILINE | re.IGNORECASE
        return re.search(pattern, self._text, flags) is not None

    # --------------------------------------------------------------------------
    # Element capabilities
    # --------------------------------------------------------------------------

    def length(self) -> int:
        # A newline-terminated file splits into one more piece than it has lines
        return len(self.lines()) - 1

    def is_empty(self) -> bool:
        return len(self._text) == 0

    def size(self) -> int:
        """Live byte size of the file, -1 if it no longer exists."""
        if not os.path.exists(self.path):
            return -1
        return os.path.getsize(self.path)

    def __str__(self) -> str:
        return self._text
