"""Shared fixtures for the ``lib_typed_config`` test-suite."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    """Copy the sample configuration files into a private directory."""

    target = tmp_path / "data"
    shutil.copytree(DATA_DIR, target)
    return target
