"""Application-layer merge policy.

Purpose
-------
Apply a source mapping onto a container's field set under a single overwrite
flag. Construction, direct mapping loads and every file load reduce to
"produce a mapping, then merge it" so this is the only place where fields are
written.

Contents
    - ``merge_fields``: the merge loop, reports which keys were applied.
    - ``MergeOutcome``: applied/skipped key names for logging and tests.
    - ``as_mapping``: accept a mapping or a record object as a merge source.

System Role
-----------
Called by :class:`lib_typed_config.core.Config`. Free of I/O; readers have
fully materialised their mapping before this module sees it, so a merge never
stops halfway.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, MutableMapping


@dataclass(frozen=True, slots=True)
class MergeOutcome:
    """Names of the keys a merge wrote and the keys it left alone.

    Examples
    --------
    >>> outcome = MergeOutcome(applied=("debug",), skipped=("port",))
    >>> outcome.applied, outcome.skipped
    (('debug',), ('port',))
    """

    applied: tuple[str, ...] = field(default_factory=tuple)
    skipped: tuple[str, ...] = field(default_factory=tuple)


def merge_fields(
    target: MutableMapping[str, Any],
    source: Mapping[str, Any],
    *,
    overwrite: bool,
) -> MergeOutcome:
    """Merge *source* into *target* in the iteration order of *source*.

    What
    ----
    With ``overwrite`` false an entry whose name already exists in *target*
    is skipped and the existing value kept. Otherwise the value is inserted
    or replaces the existing one. Collisions are not errors.

    Parameters
    ----------
    target:
        Field set that is mutated in place.
    source:
        Canonical mapping of field names to values.
    overwrite:
        ``True`` replaces existing fields, ``False`` only fills gaps.

    Returns
    -------
    MergeOutcome
        Applied and skipped key names, in source order.

    Examples
    --------
    >>> fields = {"debug": False}
    >>> merge_fields(fields, {"debug": True, "port": 80}, overwrite=False).skipped
    ('debug',)
    >>> fields
    {'debug': False, 'port': 80}
    >>> _ = merge_fields(fields, {"debug": True}, overwrite=True)
    >>> fields["debug"]
    True
    """

    applied: list[str] = []
    skipped: list[str] = []
    for name, value in source.items():
        if not overwrite and name in target:
            skipped.append(name)
            continue
        target[name] = value
        applied.append(name)
    return MergeOutcome(applied=tuple(applied), skipped=tuple(skipped))


def as_mapping(source: object) -> Mapping[str, Any]:
    """Return *source* as a mapping of field names to values.

    Mappings are returned unchanged. Record objects (anything with a
    ``__dict__``, e.g. dataclass or ``SimpleNamespace`` instances) contribute
    their public attributes. Scalars, sequences and ``None`` are rejected.

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> as_mapping(SimpleNamespace(debug=True, _hidden=1))
    {'debug': True}
    >>> as_mapping([1, 2])
    Traceback (most recent call last):
    ...
    TypeError: Cannot merge object of type list; expected a mapping or a record
    """

    if isinstance(source, Mapping):
        return source
    if not isinstance(source, type) and hasattr(source, "__dict__"):
        return {name: value for name, value in vars(source).items() if not name.startswith("_")}
    raise TypeError(f"Cannot merge object of type {type(source).__name__}; expected a mapping or a record")
