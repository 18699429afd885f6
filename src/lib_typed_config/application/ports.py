"""Application-layer port for format readers.

Purpose
-------
Describe the contract every format reader satisfies so the container can
route by extension without knowing concrete parser classes.

Contents
--------
* :class:`FormatReader` – parses a file into a canonical mapping.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class FormatReader(Protocol):
    """Parse one configuration file into a canonical field mapping.

    Attributes
    ----------
    format_name:
        Short label used in log events (``"toml"``, ``"ini"``, ``"json"``).
    """

    format_name: str

    def read(self, path: str) -> Mapping[str, Any]:
        """Return the mapping for *path*; raise ``NotFound`` or ``InvalidFormat``."""
