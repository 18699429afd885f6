"""Reader contract tests.

Every registered reader must satisfy the ``FormatReader`` port and decode the
sample file of its own format into the same canonical mapping.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_typed_config.application import ports
from lib_typed_config.core import FORMAT_READERS

EXPECTED = {"debug": True, "dbHost": "db.internal", "dbPort": 5432, "tags": ["alpha", "beta"]}
SAMPLES = {"native": "config.toml", "ini": "config.ini", "json": "config.json"}


@pytest.mark.parametrize("group", sorted(FORMAT_READERS))
def test_reader_contract(group: str, data_dir: Path) -> None:
    reader = FORMAT_READERS[group]
    assert isinstance(reader, ports.FormatReader)
    assert reader.read(str(data_dir / SAMPLES[group])) == EXPECTED


def test_every_group_has_a_reader() -> None:
    assert set(FORMAT_READERS) == set(SAMPLES)
