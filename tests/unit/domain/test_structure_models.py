from __future__ import annotations

"""
Unit tests for Structure Domain Models.

Verifies the default npm layout factories and the StructureReport verdicts.
"""

from npmfs.domain.element_models import DirContents
from npmfs.domain.structure_models import (
    DEFAULT_MANIFEST_NAME,
    StructureReport,
    default_manifest_keys,
    default_npm_structure,
)


def test_default_npm_structure_requires_manifest() -> None:
    """TC-01: Verify the manifest is the only required entry."""
    required, optional = default_npm_structure()
    assert required == DirContents((), (DEFAULT_MANIFEST_NAME,))
    assert "node_modules" in optional.directories
    assert "README.md" in optional.files


def test_default_factories_return_fresh_values() -> None:
    """TC-02: Verify callers cannot mutate shared defaults."""
    keys = default_manifest_keys()
    keys.append("private")
    assert default_manifest_keys() == ["name", "version"]


def test_report_ok_ignores_optional_entries() -> None:
    """TC-03: Verify missing optional entries do not fail the report."""
    report = StructureReport(path="/p", missing_optional_files=["LICENSE"])
    assert report.ok
    assert report.missing_optional


def test_report_fails_on_any_required_gap() -> None:
    """TC-04: Verify each required category fails the report."""
    assert not StructureReport(path="/p", missing_required_dirs=["src"]).ok
    assert not StructureReport(path="/p", missing_required_files=["package.json"]).ok
    assert not StructureReport(path="/p", missing_manifest_keys=["name"]).ok
    assert not StructureReport(path="/p", missing_scripts=["test"]).ok


def test_report_defaults() -> None:
    report = StructureReport(path="/p")
    assert report.ok
    assert not report.missing_optional
    assert report.size_bytes == -1
