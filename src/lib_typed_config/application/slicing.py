"""Prefix-based field selection.

Purpose
-------
Compute the renamed subset of a field set that belongs to a prefix. The
container wraps the result in a fresh, default-free :class:`Config`.
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from ..domain.keys import strip_prefix


def slice_fields(fields: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    """Return the fields of *fields* that start with *prefix*, renamed.

    Fields not matching the prefix are absent from the result. Values are
    deep-copied so the slice never aliases nested lists or mappings of the
    source.

    Examples
    --------
    >>> slice_fields({"dbHost": "localhost", "dbPort": 5432, "debug": True}, "db")
    {'host': 'localhost', 'port': 5432}
    >>> slice_fields({"debug": True}, "cache")
    {}
    """

    selected: dict[str, Any] = {}
    for name, value in fields.items():
        renamed = strip_prefix(name, prefix)
        if renamed is not None:
            selected[renamed] = deepcopy(value)
    return selected
