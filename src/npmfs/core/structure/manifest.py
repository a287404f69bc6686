from __future__ import annotations

"""
Package Manifest Checks.

Key-presence checks run against a parsed 'package.json' file element.
"""

from typing import Iterable, List

from npmfs.core.elements.json_file import JSONFile


def missing_manifest_keys(manifest: JSONFile, required_keys: Iterable[str]) -> List[str]:
    """
    List the required top-level keys the manifest does not declare.

    Args:
        manifest: Parsed manifest file.
        required_keys: Keys that must be present.

    Returns:
        List[str]: Missing keys, in declaration order.
    """
    return [key for key in required_keys if not manifest.contains_key(key)]


def missing_scripts(manifest: JSONFile, required_scripts: Iterable[str]) -> List[str]:
    """
    List the required entries absent from the manifest's "scripts" object.

    A manifest without a "scripts" object (or with a non-object value there)
    is missing every required script.
    """
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}
    return [name for name in required_scripts if name not in scripts]
