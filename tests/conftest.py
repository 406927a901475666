from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared on-disk directory fixtures and in-memory tree fixtures.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirscope.domain.tree_models import DirectoryNode, DirectoryTree, FileEntry  # noqa: E402

FIXED_MTIME = datetime(2024, 3, 1, 12, 30, 45)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """
    Create the reference directory used across builder and CLI tests.

    Structure:
    /root
      a.txt   (10 bytes)
      /sub
        b.txt (20 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_bytes(b"y" * 20)
    return root


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    """
    Create a deeper tree with several siblings per level.

    Structure:
    /project
      README.md
      setup.cfg
      /docs
        index.md
      /src
        /pkg
          __init__.py
          core.py
        /empty
      /tests
        test_core.py
    """
    root = tmp_path / "project"
    (root / "docs").mkdir(parents=True)
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "empty").mkdir()
    (root / "tests").mkdir()

    (root / "README.md").write_text("# Project", encoding="utf-8")
    (root / "setup.cfg").write_text("[metadata]", encoding="utf-8")
    (root / "docs" / "index.md").write_text("docs", encoding="utf-8")
    (root / "src" / "pkg" / "__init__.py").write_text("", encoding="utf-8")
    (root / "src" / "pkg" / "core.py").write_text("def run(): pass", encoding="utf-8")
    (root / "tests" / "test_core.py").write_text("def test(): pass", encoding="utf-8")
    return root


def make_file(name: str, size: int = 0, parent: str = "/data") -> FileEntry:
    """Build an in-memory FileEntry with a fixed timestamp."""
    return FileEntry(path=f"{parent}/{name}", name=name, size=size, modified=FIXED_MTIME)


@pytest.fixture
def sample_tree() -> DirectoryTree:
    """In-memory equivalent of ``sample_dir`` built recursively."""
    root = DirectoryNode(
        name="root",
        path="/data/root",
        children=(
            make_file("a.txt", 10, "/data/root"),
            DirectoryNode(
                name="sub",
                path="/data/root/sub",
                children=(make_file("b.txt", 20, "/data/root/sub"),),
            ),
        ),
    )
    return DirectoryTree(root=root, recursive=True)
