from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, URL conversion, live kind inspection and raw
text reads against real files under tmp_path.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from npmfs.domain.element_models import ElementType
from npmfs.infra.fs import file_url_to_path, inode_of, kind_of, normalize_path, read_text

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_joins_segments(tmp_path: Path) -> None:
    """TC-01: Verify extra segments are joined and the result is absolute."""
    assert normalize_path(str(tmp_path), "a", "b") == os.path.join(str(tmp_path), "a", "b")


def test_normalize_strips_and_collapses(tmp_path: Path) -> None:
    messy = f"  {tmp_path}{os.sep}x{os.sep}..{os.sep}  "
    assert normalize_path(messy) == str(tmp_path)


def test_normalize_expands_user_and_vars(tmp_path: Path) -> None:
    with patch.dict(os.environ, {"HOME": str(tmp_path), "NPMFS_SUB": "pkg"}):
        assert normalize_path("~/$NPMFS_SUB") == os.path.join(str(tmp_path), "pkg")


def test_file_url_to_path(tmp_path: Path) -> None:
    target = tmp_path / "with space"
    assert file_url_to_path(target.as_uri()) == str(target)


def test_file_url_rejects_other_schemes() -> None:
    with pytest.raises(ValueError):
        file_url_to_path("http://example.com/pkg")

# -----------------------------------------------------------------------------
# INSPECTION TESTS
# -----------------------------------------------------------------------------

def test_kind_of(tmp_path: Path) -> None:
    """TC-02: Verify live kind detection for files, directories and gaps."""
    f = tmp_path / "a.txt"
    f.write_text("x", encoding="utf-8")

    assert kind_of(str(f)) is ElementType.FILE
    assert kind_of(str(tmp_path)) is ElementType.DIRECTORY
    assert kind_of(str(tmp_path / "ghost")) is None
    assert kind_of(str(f / "below-a-file")) is None


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_kind_of_follows_links(tmp_path: Path) -> None:
    link = tmp_path / "link"
    try:
        os.symlink(str(tmp_path), str(link), target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")
    assert kind_of(str(link)) is ElementType.DIRECTORY


def test_inode_of(tmp_path: Path) -> None:
    assert inode_of(str(tmp_path)) == os.lstat(str(tmp_path)).st_ino


def test_read_text_preserves_newlines(tmp_path: Path) -> None:
    """TC-03: Verify CRLF sequences survive a read untouched."""
    f = tmp_path / "crlf.txt"
    f.write_bytes("ñ\r\nb".encode("utf-8"))
    assert read_text(str(f)) == "ñ\r\nb"


def test_read_text_replaces_undecodable_bytes(tmp_path: Path) -> None:
    """TC-04: Verify Latin-1 bytes are replaced rather than raising."""
    f = tmp_path / "latin1.txt"
    f.write_bytes("café\n".encode("latin-1"))
    assert read_text(str(f)) == "caf�\n"


def test_normalize_accepts_path_like(tmp_path: Path) -> None:
    assert normalize_path(tmp_path, Path("a")) == os.path.join(str(tmp_path), "a")
