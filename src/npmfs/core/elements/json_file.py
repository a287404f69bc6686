from __future__ import annotations

"""
JSON File Element.

A file element whose snapshot is parsed as a JSON object at construction.
Used to read package manifests such as 'package.json'.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from npmfs.core.elements.file import FileElement
from npmfs.domain.errors import JSONFileParseError


class JSONFile(FileElement):
    """Existing JSON file exposing read-only key/value accessors."""

    __slots__ = ("_data",)

    def __init__(self, path: str, *more_paths: str):
        super().__init__(path, *more_paths, exists=True)
        try:
            parsed = json.loads(self.text)
        except json.JSONDecodeError as e:
            raise JSONFileParseError(f"error parsing json file at '{self.path}': {e}", self.path) from e

        if not isinstance(parsed, dict):
            raise JSONFileParseError(
                f"json file at '{self.path}' does not hold an object (found {type(parsed).__name__})",
                self.path,
            )
        self._data: Dict[str, Any] = parsed

    @property
    def data(self) -> Mapping[str, Any]:
        """Read-only view of the parsed top-level object."""
        return MappingProxyType(self._data)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def values(self) -> List[Any]:
        return list(self._data.values())

    def entries(self) -> List[Tuple[str, Any]]:
        return list(self._data.items())

    def contains_key(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._data.get(key, default)

    def with_keys(self, key: str, *keys: str) -> Dict[str, Any]:
        """Return a new dict holding only the requested keys that are present."""
        wanted = (key,) + keys
        return {k: v for k, v in self._data.items() if k in wanted}

    def without_keys(self, *keys: str) -> Dict[str, Any]:
        """Return a new dict with the given keys omitted."""
        return {k: v for k, v in self._data.items() if k not in keys}
