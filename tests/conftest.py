"""Shared fixtures for neols tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Create a directory with files, a hidden file, and a subdirectory.

    Structure::

        root/
        ├── .hidden
        ├── a.txt
        ├── b.txt
        └── sub/
    """
    root = tmp_path / "root"
    root.mkdir()
    # Created out of order so readdir order is unlikely to be sorted.
    (root / "b.txt").write_text("bbb")
    (root / "sub").mkdir()
    (root / ".hidden").write_text("h")
    (root / "a.txt").write_text("a")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a nested tree for recursive listing.

    Structure::

        root/
        ├── .dot/
        │   └── inner.txt
        ├── a.txt
        ├── sub/
        │   ├── c.txt
        │   └── deeper/
        │       └── d.txt
        └── z/
    """
    root = tmp_path / "root"
    (root / "z").mkdir(parents=True)
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "sub" / "deeper" / "d.txt").write_text("d")
    (root / "sub" / "c.txt").write_text("c")
    (root / "a.txt").write_text("a")
    (root / ".dot").mkdir()
    (root / ".dot" / "inner.txt").write_text("i")
    return root
