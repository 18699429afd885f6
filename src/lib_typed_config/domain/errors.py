"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the format readers, the container, and
consuming applications. The hierarchy lives in the domain layer so adapters
and the composition root can depend on it without depending on each other.

Contents
--------
* :class:`ConfigError` – umbrella base class for all configuration-related
  issues.
* :class:`UnsupportedFormat` – the file extension matches no known format.
* :class:`NotFound` – the configuration file does not exist.
* :class:`InvalidFormat` – the file exists but its content cannot be read as
  a mapping.

System Role
-----------
Readers raise :class:`NotFound` and :class:`InvalidFormat`; the container
raises :class:`UnsupportedFormat` while routing by extension. All of them
propagate to the caller unchanged. Callers catch :class:`ConfigError` to
handle every library failure uniformly.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_typed_config``."""


class UnsupportedFormat(ConfigError):
    """Raised when a file extension belongs to none of the known format groups.

    Why
    ----
    Routing is purely extension based. There is no content sniffing and no
    fallback format, so an unknown extension has to fail loudly.
    """


class NotFound(ConfigError):
    """Raised when the configuration file to load does not exist."""


class InvalidFormat(ConfigError):
    """Raised when an existing file cannot be parsed into a field mapping.

    Typical Sources
    ---------------
    Unreadable paths such as directories, :mod:`tomllib` and :mod:`json`
    decode errors (including nesting too deep to parse), malformed INI
    lines, or a parser result that is not a mapping (for example a top-level JSON array).
    The parser message is kept in the exception text and the original
    exception is chained as ``__cause__``.
    """
