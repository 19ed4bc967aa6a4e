"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pathentry.entry import PathEntry


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Create a test tree: test/directory/ and test/file.txt."""
    root = tmp_path / "test"
    root.mkdir()
    (root / "directory").mkdir()
    (root / "file.txt").touch()
    return root


@pytest.fixture
def directory(root_dir: Path) -> PathEntry:
    """Entry for an existing directory."""
    return PathEntry(str(root_dir))


@pytest.fixture
def file(root_dir: Path) -> PathEntry:
    """Entry for an existing empty file."""
    return PathEntry(str(root_dir / "file.txt"))


@pytest.fixture
def fake(root_dir: Path) -> PathEntry:
    """Entry for a path that does not exist."""
    return PathEntry(str(root_dir / "fake.txt"))


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_file.return_value = False
    fs.is_dir.return_value = False
    fs.access.return_value = False
    fs.read_text.return_value = ""
    return fs
