"""Shared fixtures for checkit tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

SAMPLE_CHECKLIST = """\
[x] Buy milk
[ ] Walk dog
[ ] Write report
"""


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def sample_checklist(temp_project: Path) -> Path:
    """Create a sample checklist file."""
    path = temp_project / "todo.txt"
    path.write_text(SAMPLE_CHECKLIST)
    return path


@pytest.fixture
def temp_checkit_dir(temp_project: Path) -> Path:
    """Create a temporary .checkit directory."""
    checkit_dir = temp_project / ".checkit"
    checkit_dir.mkdir()
    return checkit_dir
