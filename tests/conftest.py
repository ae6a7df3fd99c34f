"""Pytest configuration and fixtures for maid tests"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure src directory is in Python path before any imports
project_root = Path(__file__).resolve().parent.parent
src_path = project_root / "src"

if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from maid.models import FileRecord


@pytest.fixture
def make_record():
    """Build an in-memory FileRecord without touching the filesystem."""

    def _make(name: str, content: str = "", created_at: datetime = None, directory: str = "/work"):
        return FileRecord.create(Path(directory) / name, content, created_at=created_at)

    return _make


@pytest.fixture
def write_file(tmp_path):
    """Write a text file under tmp_path and return its path."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
