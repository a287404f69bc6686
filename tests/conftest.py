from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building small package trees under tmp_path.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys defined in 'npmfs.domain.config'.
    """
    return {
        "root_path": str(tmp_path),
        "discover_root": False,
        "manifest_name": "package.json",
        "required_dirs": [],
        "required_files": ["package.json"],
        "optional_dirs": ["node_modules", ".git"],
        "optional_files": ["package-lock.json", "README.md", "LICENSE", ".gitignore"],
        "required_manifest_keys": ["name", "version"],
        "required_scripts": [],
        "measure_size": False,
        "fail_on_optional": False,
    }


@pytest.fixture
def npm_project(tmp_path: Path) -> Path:
    """
    Create a minimal npm package.

    Structure:
    /pkg
      /node_modules
        /left-pad
          index.js
      /src
        index.js
      package.json
      README.md
    """
    root = tmp_path / "pkg"
    root.mkdir()

    (root / "src").mkdir()
    (root / "src" / "index.js").write_text("module.exports = 1;\n", encoding="utf-8")

    lib = root / "node_modules" / "left-pad"
    lib.mkdir(parents=True)
    (lib / "index.js").write_text("module.exports = pad;\n", encoding="utf-8")

    manifest = {"name": "pkg", "version": "1.0.0", "scripts": {"test": "jest"}}
    (root / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    (root / "README.md").write_text("# pkg\n", encoding="utf-8")

    return root
