from __future__ import annotations

"""
Element Error Taxonomy.

Defines the exceptions raised when a filesystem element is constructed or
queried against a path that violates its declared expectations. Every error
carries the offending path so callers can report it without re-parsing the
message.
"""


# -----------------------------------------------------------------------------
# BASE ERROR
# -----------------------------------------------------------------------------

class ElementError(Exception):
    """
    Root of every error raised by the element layer.

    Attributes:
        path: The path that triggered the failure (may be empty).
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


# -----------------------------------------------------------------------------
# INVALID INPUT
# -----------------------------------------------------------------------------

class BlankPathError(ElementError, ValueError):
    """The path argument is empty or contains only whitespace."""


class MissingStatusError(ElementError, ValueError):
    """Neither an existence flag nor an element type was supplied."""


# -----------------------------------------------------------------------------
# CONTRACT VIOLATIONS
# -----------------------------------------------------------------------------

class PathDoesNotExistError(ElementError, FileNotFoundError):
    """An element expected to exist points to nothing on disk."""


class PathAlreadyExistsError(ElementError, FileExistsError):
    """A virtual element points to a path that is already occupied."""


class TypeMismatchError(ElementError):
    """The on-disk kind of a path differs from the declared element type."""


# -----------------------------------------------------------------------------
# PARSE FAILURES
# -----------------------------------------------------------------------------

class JSONFileParseError(ElementError, ValueError):
    """The text snapshot of a JSON file element is not a JSON object."""
