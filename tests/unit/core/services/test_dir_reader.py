from __future__ import annotations

"""
Unit tests for the Directory Listing Service.
"""

import os
from pathlib import Path

import pytest

from npmfs.core.services.dir_reader import read_dir
from npmfs.domain.element_models import EntryKind
from npmfs.domain.errors import PathDoesNotExistError, TypeMismatchError


@pytest.fixture
def nested(tmp_path: Path) -> Path:
    (tmp_path / "x" / "y").mkdir(parents=True)
    (tmp_path / "x" / "y" / "deep.txt").write_text("d", encoding="utf-8")
    (tmp_path / "x" / "mid.txt").write_text("m", encoding="utf-8")
    (tmp_path / "top.txt").write_text("t", encoding="utf-8")
    return tmp_path


def test_flat_read_filters_by_kind(nested: Path) -> None:
    """TC-01: Verify FILE, DIRECTORY and BOTH filters one level deep."""
    assert read_dir(str(nested), EntryKind.FILE).names == ("top.txt",)
    assert read_dir(str(nested), EntryKind.DIRECTORY).names == ("x",)
    assert read_dir(str(nested)).names == ("top.txt", "x")


def test_kind_accepts_string(nested: Path) -> None:
    assert read_dir(str(nested), "FILE").names == ("top.txt",)  # type: ignore[arg-type]


def test_recursive_post_order(nested: Path) -> None:
    """TC-02: Verify children precede their directory and the root is excluded."""
    listing = read_dir(str(nested), EntryKind.BOTH, recursive=True)

    assert listing.names == ("top.txt", "mid.txt", "deep.txt", "y", "x")
    assert listing.root == str(nested)
    assert str(nested) not in listing.paths


def test_recursive_directories_only(nested: Path) -> None:
    listing = read_dir(str(nested), EntryKind.DIRECTORY, recursive=True)
    assert listing.paths == (str(nested / "x" / "y"), str(nested / "x"))


def test_empty_directory(tmp_path: Path) -> None:
    assert read_dir(str(tmp_path), recursive=True).count == 0


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(PathDoesNotExistError):
        read_dir(str(tmp_path / "nope"))


def test_file_is_not_a_directory(nested: Path) -> None:
    with pytest.raises(TypeMismatchError):
        read_dir(str(nested / "top.txt"))


def test_read_logs_debug(nested: Path, caplog) -> None:
    caplog.set_level("DEBUG", logger="npmfs.core.services.dir_reader")
    read_dir(str(nested))
    assert f"from '{nested}'" in caplog.text


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinks_only_in_both_listing(nested: Path) -> None:
    try:
        os.symlink(str(nested / "top.txt"), str(nested / "link.txt"))
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert "link.txt" in read_dir(str(nested)).names
    assert "link.txt" not in read_dir(str(nested), EntryKind.FILE).names
