"""Logging helpers for tag resolution and store access.

Every lookup passes through three observable steps: the tag strategy produces a
tag, the key-value source hands over a collection, and the qualified key is
found or missing. Each step emits one named event (``tag_resolved``,
``collection_fetched``, ``value_missing`` ...) whose fields land under
``record.context``. Handlers can then filter on ``source`` (the strategy or
source class) and ``key`` (the logical or qualified key) without parsing
messages.

The package logger carries a ``NullHandler``; nothing is printed unless the
host application configures logging. ``bind_trace_id`` tags every event of a
request with the caller's correlation id.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_tagged_config_trace_id", default=None)
"""Correlation id copied into every event emitted in the current context."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_tagged_config")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``lib_tagged_config`` logger for handler and level setup."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Attach *trace_id* to subsequent resolution events; ``None`` clears it.

    Examples
    --------
    >>> bind_trace_id('req-42')
    >>> TRACE_ID.get()
    'req-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Record a routine step such as a resolved tag or a loaded store file."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Record a filesystem change made on the caller's behalf."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Record a failed lookup right before the matching exception is raised."""

    _emit(logging.ERROR, message, fields)


def make_event(
    source: str,
    key: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the ``source`` / ``key`` fields shared by resolution events.

    Examples
    --------
    >>> make_event('AppSettingsSource', 'Dev.Setting', {'entries': 3})
    {'source': 'AppSettingsSource', 'key': 'Dev.Setting', 'entries': 3}
    """

    event: dict[str, Any] = {"source": source, "key": key}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    _LOGGER.log(level, message, extra={"context": {"trace_id": TRACE_ID.get(), **fields}})
