"""Shared fixtures for tree copy tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Create src/ with a.txt, b/c.txt and a symlink d -> a.txt."""
    src = tmp_path / "src"
    (src / "b").mkdir(parents=True)
    (src / "a.txt").write_text("hello")
    (src / "b" / "c.txt").write_text("world")
    os.symlink("a.txt", src / "d")
    return src


def snapshot_tree(root: Path) -> dict[str, tuple[str, bytes | str | None]]:
    """Map every relative path under root to its kind and content.

    Files map to their bytes, symlinks to their target string and
    directories to None. Symlinks are never followed.
    """
    result: dict[str, tuple[str, bytes | str | None]] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            full = os.path.join(dirpath, name)
            rel = os.path.relpath(full, root)
            if os.path.islink(full):
                result[rel] = ("symlink", os.readlink(full))
            elif os.path.isdir(full):
                result[rel] = ("directory", None)
            elif os.path.isfile(full):
                with open(full, "rb") as f:
                    result[rel] = ("file", f.read())
            else:
                result[rel] = ("other", None)
    return result
