"""INI-style file reader.

Purpose
-------
Parse flat ``key = value`` files (``.ini``, ``.cfg``, ``.config``, ``.env``)
into a canonical field mapping with typed scalars and camel-case keys.

Contents
--------
* :class:`IniFileReader` – reader registered for the ini-style group.
* Helpers (`_parse_ini`, `_scan_value`, `_strip_comment`, `_assign`) that do the line
  scanning.

Syntax
------
* Blank lines and lines starting with ``;`` or ``#`` are ignored.
* ``[section]`` headers are accepted and flattened away; a later key wins.
* ``key[] = value`` appends to a list, ``key[name] = value`` fills a mapping.
* Unquoted values are typed: ``true/on/yes`` and ``false/off/no/none`` become
  booleans, ``null`` becomes ``None``, decimal integers and floats become
  numbers. Quoted values stay literal strings.
"""

from __future__ import annotations

import re
from typing import Any, Final

from ...domain.errors import InvalidFormat
from ...domain.keys import normalize_key
from ...observability import log_debug, log_error
from .structured import BaseFileReader

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "on", "yes"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "off", "no", "none"})
_NULL_WORDS: Final[frozenset[str]] = frozenset({"null"})
_COMMENT_MARKERS: Final[tuple[str, ...]] = (";", "#")
_QUOTES: Final[frozenset[str]] = frozenset({'"', "'"})

_INT_RE: Final = re.compile(r"[+-]?\d+")
_FLOAT_RE: Final = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?=[eE]))(?:[eE][+-]?\d+)?")
_KEY_RE: Final = re.compile(r"(?P<name>[^\[\]]+?)\s*(?:\[(?P<sub>[^\[\]]*)\])?")


class IniFileReader(BaseFileReader):
    """Read INI-style files into camel-cased field mappings."""

    format_name = "ini"

    def read(self, path: str) -> dict[str, Any]:
        """Return the typed, key-normalised entries of the file at *path*.

        Examples
        --------
        >>> from pathlib import Path
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', suffix='.ini', delete=False, encoding='utf-8')
        >>> _ = tmp.write('db.connection_pool = 5\\nDEBUG = on\\n')
        >>> tmp.close()
        >>> IniFileReader().read(tmp.name)
        {'dbConnectionPool': 5, 'debug': True}
        >>> Path(tmp.name).unlink()
        """

        payload = self._read(path)
        try:
            text = payload.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise self._invalid(path, exc) from exc
        result = _parse_ini(text, path=path)
        log_debug("config_file_loaded", source=self.format_name, path=path, keys=len(result))
        return result


def _parse_ini(text: str, *, path: str) -> dict[str, Any]:
    """Scan *text* line by line, raising :class:`InvalidFormat` on malformed lines.

    Examples
    --------
    >>> _parse_ini('[server]\\nport = 8080\\nhosts[] = a\\nhosts[] = b\\n', path='demo')
    {'port': 8080, 'hosts': ['a', 'b']}
    >>> _parse_ini('just words', path='demo')
    Traceback (most recent call last):
    ...
    lib_typed_config.domain.errors.InvalidFormat: Malformed line 1 in demo: expected 'key = value'
    """

    result: dict[str, Any] = {}
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_MARKERS):
            continue
        if line.startswith("["):
            if not line.endswith("]"):
                raise _malformed(path, line_number, "unterminated section header")
            continue
        if "=" not in line:
            raise _malformed(path, line_number, "expected 'key = value'")
        raw_key, raw_value = line.split("=", 1)
        match = _KEY_RE.fullmatch(raw_key.strip())
        if match is None:
            raise _malformed(path, line_number, f"invalid key {raw_key.strip()!r}")
        name = normalize_key(match.group("name").strip())
        if not name:
            raise _malformed(path, line_number, "empty key")
        _assign(result, name, match.group("sub"), _scan_value(raw_value.strip()))
    return result


def _scan_value(raw: str) -> Any:
    """Convert an INI value to its typed Python representation.

    Examples
    --------
    >>> [_scan_value(v) for v in ('yes', 'Off', 'null', '42', '-1.5', '2e3', 'text')]
    [True, False, None, 42, -1.5, 2000.0, 'text']
    >>> _scan_value('"42"')
    '42'
    >>> _scan_value('value ; trailing comment')
    'value'
    >>> _scan_value('"svc" ; quoted, then a comment')
    'svc'
    >>> _scan_value('')
    ''
    """

    value = _strip_comment(raw)
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    if lowered in _NULL_WORDS:
        return None
    if _INT_RE.fullmatch(value):
        return int(value)
    if _FLOAT_RE.fullmatch(value):
        return float(value)
    return value


def _strip_comment(raw: str) -> str:
    """Cut *raw* at the first ``;`` that is not inside quotes.

    Examples
    --------
    >>> _strip_comment('"a ; b" ; note')
    '"a ; b"'
    >>> _strip_comment("plain")
    'plain'
    """

    quote: str | None = None
    for index, char in enumerate(raw):
        if quote is not None:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char == ";":
            return raw[:index].strip()
    return raw.strip()


def _assign(target: dict[str, Any], name: str, sub: str | None, value: Any) -> None:
    """Store *value* under *name*, honouring ``name[]`` and ``name[sub]`` syntax.

    A plain key replaces whatever was there. Bracketed keys turn a previous
    scalar into a fresh list or mapping.

    Examples
    --------
    >>> data: dict[str, Any] = {}
    >>> _assign(data, 'limits', 'cpu', 2)
    >>> _assign(data, 'limits', 'memory', '1G')
    >>> data
    {'limits': {'cpu': 2, 'memory': '1G'}}
    """

    if sub is None:
        target[name] = value
        return
    sub = sub.strip()
    if not sub:
        existing = target.get(name)
        if not isinstance(existing, list):
            existing = target[name] = []
        existing.append(value)
        return
    existing = target.get(name)
    if not isinstance(existing, dict):
        existing = target[name] = {}
    existing[sub] = value


def _malformed(path: str, line_number: int, reason: str) -> InvalidFormat:
    """Log and build the error for a malformed line."""

    log_error("config_file_invalid", source="ini", path=path, line=line_number, error=reason)
    return InvalidFormat(f"Malformed line {line_number} in {path}: {reason}")
