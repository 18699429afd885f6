"""Structured configuration file readers.

Purpose
-------
Convert TOML and JSON files into canonical field mappings. Readers are small
wrappers around ``tomllib`` and ``json`` so existence checks, error wrapping
and logging live in one place.

Contents
--------
* :class:`BaseFileReader` – shared helpers for reading bytes and validating
  that the parser produced a mapping.
* :class:`TOMLFileReader` – the native structured format.
* :class:`JSONFileReader` – single-object JSON documents.

System Role
-----------
Registered in :data:`lib_typed_config.core.FORMAT_READERS` and invoked by the
container's ``load_from_*`` methods before merging.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[no-redef]

from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error


class BaseFileReader:
    """Common utilities shared by the file readers."""

    format_name = "file"

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when the file is missing.

        A path that exists but cannot be read (a directory, missing
        permissions) raises :class:`InvalidFormat`.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b"debug = true")
        >>> tmp.close()
        >>> BaseFileReader()._read(tmp.name)[:5]
        b'debug'
        >>> Path(tmp.name).unlink()
        """

        file_path = Path(path)
        if not file_path.exists():
            log_error("config_file_missing", source=self.format_name, path=path)
            raise NotFound(f"Configuration file not found: {path}")
        try:
            payload = file_path.read_bytes()
        except OSError as exc:
            raise self._invalid(path, exc) from exc
        log_debug("config_file_read", source=self.format_name, path=path, size=len(payload))
        return payload

    def _ensure_mapping(self, data: object, *, path: str) -> dict[str, Any]:
        """Return *data* as a plain ``dict`` or raise :class:`InvalidFormat`.

        Examples
        --------
        >>> BaseFileReader()._ensure_mapping({"debug": True}, path="demo")
        {'debug': True}
        >>> BaseFileReader()._ensure_mapping([1, 2], path="demo")
        Traceback (most recent call last):
        ...
        lib_typed_config.domain.errors.InvalidFormat: File demo did not produce a mapping (got list)
        """

        if not isinstance(data, Mapping):
            log_error("config_file_invalid", source=self.format_name, path=path, error="not a mapping")
            raise InvalidFormat(f"File {path} did not produce a mapping (got {type(data).__name__})")
        return dict(data)

    def _invalid(self, path: str, exc: Exception) -> InvalidFormat:
        """Log a parser failure and build the :class:`InvalidFormat` to raise."""

        log_error("config_file_invalid", source=self.format_name, path=path, error=str(exc))
        return InvalidFormat(f"Invalid {self.format_name.upper()} in {path}: {exc}")


class TOMLFileReader(BaseFileReader):
    """Read TOML documents using the standard library parser."""

    format_name = "toml"

    def read(self, path: str) -> dict[str, Any]:
        """Return the top-level table of the TOML file at *path*.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', suffix='.toml', delete=False, encoding='utf-8')
        >>> _ = tmp.write('debug = true')
        >>> tmp.close()
        >>> TOMLFileReader().read(tmp.name)["debug"]
        True
        >>> Path(tmp.name).unlink()
        """

        payload = self._read(path)
        try:
            data = tomllib.loads(payload.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise self._invalid(path, exc) from exc
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", source=self.format_name, path=path, keys=len(result))
        return result


class JSONFileReader(BaseFileReader):
    """Read JSON documents whose top-level value is an object.

    Member names are kept verbatim; JSON keys are expected to already use the
    canonical field naming.
    """

    format_name = "json"

    def read(self, path: str) -> dict[str, Any]:
        """Return the members of the JSON object stored at *path*.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', suffix='.json', delete=False, encoding='utf-8')
        >>> _ = tmp.write('{"debugMode": true}')
        >>> tmp.close()
        >>> JSONFileReader().read(tmp.name)
        {'debugMode': True}
        >>> Path(tmp.name).unlink()
        """

        payload = self._read(path)
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            raise self._invalid(path, exc) from exc
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", source=self.format_name, path=path, keys=len(result))
        return result
