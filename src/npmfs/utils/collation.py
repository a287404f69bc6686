from __future__ import annotations

"""
Base-Sensitivity String Collation.

Comparison helpers that treat strings differing only by letter case or
diacritical marks as equal ("README.md" == "readme.MD", "café" == "cafe").
"""

import unicodedata


def collation_key(value: str) -> str:
    """
    Reduce a string to its base letters for case/accent-insensitive matching.

    Decomposes the string (NFKD), drops combining marks and applies Unicode
    case folding.

    Args:
        value: Raw string.

    Returns:
        str: Comparison key.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def base_equals(left: str, right: str) -> bool:
    """Return True if both strings share the same collation key."""
    return collation_key(left) == collation_key(right)
