"""Typed configuration container populated from mappings, TOML, INI and JSON files.

The public surface is the :class:`Config` container, its error taxonomy and
the logging hooks. Everything else is an implementation detail.
"""

from __future__ import annotations

from .core import EXTENSION_GROUPS, Config, file_extension, resolve_format
from .domain.errors import ConfigError, InvalidFormat, NotFound, UnsupportedFormat
from .domain.keys import normalize_key
from .observability import bind_trace_id, get_logger

__all__ = [
    "Config",
    "ConfigError",
    "EXTENSION_GROUPS",
    "InvalidFormat",
    "NotFound",
    "UnsupportedFormat",
    "bind_trace_id",
    "file_extension",
    "get_logger",
    "normalize_key",
    "resolve_format",
]
