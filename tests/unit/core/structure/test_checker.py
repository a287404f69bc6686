from __future__ import annotations

"""
Unit tests for the project check orchestrator.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from npmfs.core.structure.checker import check_project
from npmfs.domain.errors import JSONFileParseError, PathDoesNotExistError


def _cfg(base: Dict[str, Any], **overrides: Any) -> Dict[str, Any]:
    out = dict(base)
    out.update(overrides)
    return out


def test_valid_project(npm_project: Path, mock_config_dict: Dict[str, Any]) -> None:
    """TC-01: Verify a complete package passes with only optional gaps."""
    report = check_project(_cfg(mock_config_dict, root_path=str(npm_project)))

    assert report.ok
    assert report.path == str(npm_project)
    assert report.missing_optional_dirs == [".git"]
    assert report.missing_optional_files == ["package-lock.json", "LICENSE", ".gitignore"]
    assert report.size_bytes == -1


def test_missing_required_entries(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    """TC-02: Verify a bare 'src' directory lacks 'docs' and the manifest."""
    (tmp_path / "src").mkdir()
    report = check_project(_cfg(mock_config_dict, required_dirs=["src", "docs"]))

    assert report.missing_required_dirs == ["docs"]
    assert report.missing_required_files == ["package.json"]
    assert report.missing_manifest_keys == []
    assert not report.ok


def test_manifest_keys_and_scripts(npm_project: Path, mock_config_dict: Dict[str, Any]) -> None:
    report = check_project(_cfg(
        mock_config_dict,
        root_path=str(npm_project),
        required_manifest_keys=["name", "license"],
        required_scripts=["test", "build"],
    ))

    assert report.missing_manifest_keys == ["license"]
    assert report.missing_scripts == ["build"]
    assert not report.ok


def test_measure_size(npm_project: Path, mock_config_dict: Dict[str, Any]) -> None:
    report = check_project(_cfg(mock_config_dict, root_path=str(npm_project), measure_size=True))
    expected = sum(p.stat().st_size for p in npm_project.rglob("*") if p.is_file())
    assert report.size_bytes == expected


def test_discover_root(npm_project: Path, mock_config_dict: Dict[str, Any]) -> None:
    """TC-03: Verify discovery climbs from a nested directory to the package root."""
    nested = npm_project / "src"
    report = check_project(_cfg(mock_config_dict, root_path=str(nested), discover_root=True))
    assert report.path == str(npm_project)
    assert report.ok


def test_discover_without_manifest_checks_start(tmp_path: Path, mock_config_dict: Dict[str, Any], caplog) -> None:
    start = tmp_path / "lonely"
    start.mkdir()
    report = check_project(_cfg(
        mock_config_dict,
        root_path=str(start),
        discover_root=True,
        manifest_name="unlikely-manifest-name.json",
    ))

    assert report.path == str(start)
    assert "Checking it as-is" in caplog.text


def test_invalid_root(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    with pytest.raises(PathDoesNotExistError):
        check_project(_cfg(mock_config_dict, root_path=str(tmp_path / "ghost")))


def test_broken_manifest(npm_project: Path, mock_config_dict: Dict[str, Any]) -> None:
    (npm_project / "package.json").write_text("{ broken", encoding="utf-8")
    with pytest.raises(JSONFileParseError):
        check_project(_cfg(mock_config_dict, root_path=str(npm_project)))


def test_configuration_warnings_are_logged(npm_project: Path, caplog) -> None:
    check_project({"root_path": str(npm_project), "measure_size": "yes"})
    assert "Configuration Warning" in caplog.text


def test_manifest_json_round_trip(npm_project: Path, mock_config_dict: Dict[str, Any]) -> None:
    manifest = json.loads((npm_project / "package.json").read_text(encoding="utf-8"))
    manifest.pop("version")
    (npm_project / "package.json").write_text(json.dumps(manifest), encoding="utf-8")

    report = check_project(_cfg(mock_config_dict, root_path=str(npm_project)))
    assert report.missing_manifest_keys == ["version"]
