"""Composition root for ``lib_typed_config``.

Purpose
-------
Provide the :class:`Config` container: a mutable field set that is seeded
with declared defaults, populated from mappings and files, and sliced by
field-name prefix. File loads are routed to a format reader by extension and
the resulting mapping is handed to the merge policy.

Contents
--------
* :data:`EXTENSION_GROUPS` – extension routing table per format group.
* :data:`FORMAT_READERS` – reader instance per format group.
* :func:`resolve_format` – map a path to its format group.
* :class:`Config` – the container.

System Role
-----------
Connects the readers in :mod:`lib_typed_config.adapters.file_loaders` with
the merge and slice rules of :mod:`lib_typed_config.application`. A reader
failure is raised before any merge starts, so a failed load leaves the
container exactly as it was.

Examples
--------
>>> class AppConfig(Config):
...     debug = False
...     dbHost = "localhost"
...     dbPort = 5432
>>> cfg = AppConfig({"dbPort": 6432})
>>> cfg.debug, cfg.dbPort, cfg.count()
(False, 6432, 3)
>>> cfg.load_from_mapping({"debug": True, "cacheTtl": 60})
>>> cfg.debug, cfg.cacheTtl
(False, 60)
>>> cfg.get_slice("db").as_dict()
{'host': 'localhost', 'port': 6432}
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any, ClassVar, Final, Iterator

from .adapters.file_loaders.ini import IniFileReader
from .adapters.file_loaders.structured import JSONFileReader, TOMLFileReader
from .application.merge import as_mapping, merge_fields
from .application.ports import FormatReader
from .application.slicing import slice_fields
from .domain.errors import ConfigError, InvalidFormat, NotFound, UnsupportedFormat
from .observability import log_debug, log_error, make_event

NATIVE: Final[str] = "native"
INI: Final[str] = "ini"
JSON: Final[str] = "json"

# Case-sensitive, matched against the text after the last dot of the file name.
EXTENSION_GROUPS: Final[Mapping[str, tuple[str, ...]]] = {
    NATIVE: ("toml",),
    INI: ("ini", "cfg", "config", "env"),
    JSON: ("json", "jsn", "js"),
}

FORMAT_READERS: Final[Mapping[str, FormatReader]] = {
    NATIVE: TOMLFileReader(),
    INI: IniFileReader(),
    JSON: JSONFileReader(),
}

PathLike = str | os.PathLike[str]


def file_extension(path: PathLike) -> str:
    """Return the text after the last dot of the file name in *path*.

    Examples
    --------
    >>> file_extension("/etc/app/config.json")
    'json'
    >>> file_extension("project/.env")
    'env'
    >>> file_extension("release.d/Makefile")
    ''
    """

    name = Path(path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def resolve_format(path: PathLike) -> str:
    """Return the format group for *path* or raise :class:`UnsupportedFormat`.

    Examples
    --------
    >>> resolve_format("settings.cfg")
    'ini'
    >>> resolve_format("settings.JSON")
    Traceback (most recent call last):
    ...
    lib_typed_config.domain.errors.UnsupportedFormat: File settings.JSON type not supported
    """

    extension = file_extension(path)
    for group, extensions in EXTENSION_GROUPS.items():
        if extension in extensions:
            return group
    log_error("config_format_unsupported", **make_event("file", str(path), {"extension": extension}))
    raise UnsupportedFormat(f"File {path} type not supported")


class Config(Mapping[str, Any]):
    """Typed configuration container backed by a single field set.

    Why
    ----
    Host applications declare the fields they know about, with defaults, and
    then layer values from mappings and files on top without caring which
    format each file uses.

    What
    ----
    Public class attributes of a subclass are its declared defaults. They are
    collected when the subclass is created and deep-copied into every
    instance, so mutable defaults are never shared. Fields are read and
    written through attribute or item access; fields added by later merges
    behave exactly like declared ones.

    A field whose name matches a container member (``keys``, ``get``,
    ``count``, ``as_dict``...) is only reachable through item access, since
    attribute lookup finds the member first. Declaring such a field as a
    default raises :class:`TypeError`.

    Parameters
    ----------
    initial:
        Mapping (or record object) merged over the defaults with overwrite.
    """

    _declared: ClassVar[dict[str, Any]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared = dict(cls._declared)
        for name, value in list(vars(cls).items()):
            if _is_declared_field(name, value):
                if any(name in vars(base) for base in cls.__mro__[1:]):
                    raise TypeError(f"{cls.__name__}.{name} shadows a Config member; rename the field")
                declared[name] = value
                delattr(cls, name)
        cls._declared = declared

    def __init__(self, initial: Mapping[str, Any] | object | None = None) -> None:
        object.__setattr__(self, "_fields", deepcopy(self._declared))
        if initial is not None:
            self._merge(as_mapping(initial), overwrite=True, source="mapping", path=None)

    @classmethod
    def declared_fields(cls) -> dict[str, Any]:
        """Return a copy of the defaults declared by this container type.

        Examples
        --------
        >>> class Feature(Config):
        ...     enabled = False
        >>> Feature.declared_fields()
        {'enabled': False}
        >>> Config.declared_fields()
        {}
        """

        return deepcopy(cls._declared)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!s} has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            object.__delattr__(self, name)
            return
        try:
            del self._fields[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!s} has no field {name!r}") from None

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._fields[name] = value

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._fields))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    def count(self) -> int:
        """Return the number of fields currently set.

        Examples
        --------
        >>> cfg = Config({"a": 1, "b": 2})
        >>> cfg.load_from_mapping({"b": 3, "c": 4})
        >>> cfg.count()
        3
        """

        return len(self._fields)

    def load_from_mapping(self, mapping: Mapping[str, Any] | object, overwrite: bool = False) -> None:
        """Merge *mapping* into the field set.

        With ``overwrite`` false existing fields keep their value, so the call
        only fills gaps. A record object contributes its public attributes.
        """

        self._merge(as_mapping(mapping), overwrite=overwrite, source="mapping", path=None)

    def load_from_file(self, path: PathLike, overwrite: bool = False) -> None:
        """Load *path* with the reader chosen by its extension.

        Raises
        ------
        UnsupportedFormat
            The extension belongs to no known group. Nothing is read.
        NotFound
            The file does not exist.
        InvalidFormat
            The path could not be read, or its content could not be parsed
            into a mapping.
        """

        self._load(resolve_format(path), path, overwrite)

    def load_from_native(self, path: PathLike, overwrite: bool = False) -> None:
        """Load a TOML file regardless of its extension."""

        self._load(NATIVE, path, overwrite)

    load_from_toml = load_from_native

    def load_from_ini(self, path: PathLike, overwrite: bool = False) -> None:
        """Load an INI-style file regardless of its extension.

        Keys are normalised to camel case, e.g. ``db.connection_pool``
        becomes ``dbConnectionPool``.
        """

        self._load(INI, path, overwrite)

    def load_from_json(self, path: PathLike, overwrite: bool = False) -> None:
        """Load a JSON object file regardless of its extension."""

        self._load(JSON, path, overwrite)

    def get_slice(self, prefix: str) -> Config:
        """Return a new plain :class:`Config` holding the fields under *prefix*.

        Matching fields are renamed by dropping the prefix and lower-casing the
        next letter. The slice has no declared defaults, whatever the type of
        this container, and shares no field set with it.

        Examples
        --------
        >>> cfg = Config({"prefixOneValueOne": 1, "prefixOneValueTwo": 2, "prefixTwoValueOne": 3})
        >>> cfg.get_slice("prefixOne")
        Config({'valueOne': 1, 'valueTwo': 2})
        >>> cfg.get_slice("prefixTwo").count()
        1
        """

        selected = slice_fields(self._fields, prefix)
        log_debug("config_sliced", **make_event("slice", None, {"prefix": prefix, "keys": len(selected)}))
        return Config(selected)

    def as_dict(self) -> dict[str, Any]:
        """Return a deep, mutable copy of the field set."""

        return deepcopy(self._fields)

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise the field set to JSON.

        Examples
        --------
        >>> Config({"debug": True, "hosts": ["a"]}).to_json()
        '{"debug":true,"hosts":["a"]}'
        """

        return json.dumps(self._fields, indent=indent, separators=(",", ":"), ensure_ascii=False, default=str)

    def _load(self, group: str, path: PathLike, overwrite: bool) -> None:
        """Read *path* with the reader for *group*, then merge the result."""

        location = os.fspath(path)
        data = FORMAT_READERS[group].read(location)
        self._merge(data, overwrite=overwrite, source=group, path=location)

    def _merge(self, data: Mapping[str, Any], *, overwrite: bool, source: str, path: str | None) -> None:
        outcome = merge_fields(self._fields, data, overwrite=overwrite)
        log_debug(
            "config_merged",
            **make_event(
                source,
                path,
                {"overwrite": overwrite, "applied": len(outcome.applied), "skipped": len(outcome.skipped)},
            ),
        )


def _is_declared_field(name: str, value: object) -> bool:
    """Return ``True`` when a class attribute is a field default rather than behaviour."""

    if name.startswith("_"):
        return False
    if isinstance(value, (staticmethod, classmethod, property)):
        return False
    return not callable(value)


__all__ = [
    "Config",
    "ConfigError",
    "EXTENSION_GROUPS",
    "FORMAT_READERS",
    "InvalidFormat",
    "NotFound",
    "UnsupportedFormat",
    "file_extension",
    "resolve_format",
]
