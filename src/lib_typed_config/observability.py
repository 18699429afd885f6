"""Structured logging helpers for configuration loading.

Purpose
    Give every reader, merge, and slice the same way of reporting what
    happened, without forcing host applications onto a logging backend.

Contents
    - ``TRACE_ID``: context variable holding the active trace identifier.
    - ``get_logger``: the package logger (silent until a handler is attached).
    - ``bind_trace_id``: bind or clear the trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: structured emitters.
    - ``make_event``: builds the common ``source``/``path`` payload.

System Integration
    Readers log ``config_file_*`` events, the container logs
    ``config_merged`` and ``config_sliced``. Every record carries its fields
    under ``record.context`` so handlers can render them however they like.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_typed_config_trace_id", default=None)
"""Trace identifier attached to every structured record."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_typed_config")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind *trace_id* for subsequent records; ``None`` clears it.

    Examples
    --------
    >>> bind_trace_id("load-42")
    >>> TRACE_ID.get()
    'load-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug record."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info record."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error record."""

    _emit(logging.ERROR, message, fields)


def make_event(source: str, path: str | None, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the payload shared by configuration events.

    Inputs
        source: Format or origin of the data (``"json"``, ``"mapping"``...).
        path: File the data came from, ``None`` for in-memory sources.
        payload: Optional extra fields merged into the event.

    Examples
    --------
    >>> make_event("ini", "/etc/app.ini", {"keys": 3})
    {'source': 'ini', 'path': '/etc/app.ini', 'keys': 3}
    >>> make_event("mapping", None)
    {'source': 'mapping', 'path': None}
    """

    event: dict[str, Any] = {"source": source, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send *message* through the package logger with trace context attached."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    _LOGGER.log(level, message, extra={"context": context})
