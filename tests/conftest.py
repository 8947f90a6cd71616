"""Collect every module under tests/unit, whatever its file name."""

from __future__ import annotations

from pathlib import Path

import pytest

_SKIP = {"__init__.py", "conftest.py"}


def pytest_collect_file(file_path: Path, parent):
    if file_path.suffix == ".py" and file_path.name not in _SKIP and "unit" in file_path.parts:
        return pytest.Module.from_parent(parent, path=file_path)
    return None
