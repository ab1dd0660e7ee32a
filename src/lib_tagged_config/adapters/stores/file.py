"""Configuration store backed by a structured document on disk.

Purpose
-------
Provide the Python-native counterpart of an application's native settings
file. A TOML, JSON, or YAML document carries three optional tables:

.. code-block:: toml

    [global_variables]
    environment_tag = "Dev"

    [app_settings]
    "Dev.Setting" = "x"

    [app_settings.QA]
    Setting = "y"

    [connection_strings]
    "Dev.MyConn" = "server=dev-db;database=app"

Nested tables flatten to dotted keys, so both spellings above produce
``Dev.Setting`` / ``QA.Setting``; a key produced by both spellings is an
error. Strings are returned as written. Integers, booleans, and TOML dates are
rendered as strings; floats must be quoted. YAML documents are read without
type resolution, so every YAML scalar stays the text it was written as.

System Role
-----------
The file is re-read on every accessor call; nothing is cached between calls.
"""

from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import Final, Mapping

from ...domain.errors import InvalidFormat
from ...domain.keys import SEPARATOR
from ...observability import log_debug
from ..file_loaders.structured import loader_for

APP_SETTINGS_TABLE: Final[str] = "app_settings"
CONNECTION_STRINGS_TABLE: Final[str] = "connection_strings"
GLOBAL_VARIABLES_TABLE: Final[str] = "global_variables"


class FileConfigurationStore:
    """Read the settings tables from *path* on each access.

    Raises
    ------
    NotFound
        When *path* does not exist at access time.
    InvalidFormat
        When the document cannot be parsed or its suffix is unsupported, when
        a table is not a mapping, or when an entry is a list, a float, or
        defined twice.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def app_settings(self) -> dict[str, str]:
        return self._table(APP_SETTINGS_TABLE)

    def connection_strings(self) -> dict[str, str]:
        return self._table(CONNECTION_STRINGS_TABLE)

    def global_variable(self, name: str) -> str | None:
        return self._table(GLOBAL_VARIABLES_TABLE).get(name)

    def _table(self, name: str) -> dict[str, str]:
        document = loader_for(self.path).load(str(self.path))
        raw = document.get(name, {})
        if not isinstance(raw, Mapping):
            raise InvalidFormat(f"Table {name!r} in {self.path} must be a mapping")
        table: dict[str, str] = {}
        _flatten(raw, [], table, name=name, path=self.path)
        log_debug("store_file_loaded", source="FileConfigurationStore", key=None, table=name, entries=len(table))
        return table

    def __repr__(self) -> str:
        return f"FileConfigurationStore({str(self.path)!r})"


def _flatten(
    incoming: Mapping[str, object],
    segments: list[str],
    target: dict[str, str],
    *,
    name: str,
    path: Path,
) -> None:
    """Recursively copy *incoming* into *target* using dotted keys.

    A qualified key spelled both as a quoted dotted key and through a nested
    table is rejected instead of letting document order pick a winner.

    Examples
    --------
    >>> out: dict[str, str] = {}
    >>> _flatten({"Dev": {"Port": 5432, "Debug": True}}, [], out, name="t", path=Path("x"))
    >>> out
    {'Dev.Port': '5432', 'Dev.Debug': 'true'}
    """

    for key, value in incoming.items():
        dotted = SEPARATOR.join([*segments, str(key)])
        if isinstance(value, Mapping):
            _flatten(value, [*segments, str(key)], target, name=name, path=path)
        elif isinstance(value, (list, tuple)):
            raise InvalidFormat(f"Entry {dotted!r} in table {name!r} of {path} must be a scalar, not a list")
        elif dotted in target:
            raise InvalidFormat(f"Entry {dotted!r} is defined more than once in table {name!r} of {path}")
        else:
            target[dotted] = _stringify(value, dotted=dotted, name=name, path=path)


def _stringify(value: object, *, dotted: str, name: str, path: Path) -> str:
    """Render scalar *value* as a string without losing its spelling.

    Strings pass through. Integers and booleans have a single spelling, and
    TOML dates and times render in ISO 8601. ``null`` reads as ``""``, which
    lookups treat as missing. Floats are rejected: ``1.10`` already arrives as
    ``1.1``, so they must be quoted.

    Examples
    --------
    >>> where = {"dotted": "k", "name": "t", "path": Path("x")}
    >>> _stringify(False, **where), _stringify(None, **where), _stringify("0755", **where)
    ('false', '', '0755')
    >>> from datetime import date
    >>> _stringify(date(1979, 5, 27), **where)
    '1979-05-27'
    """

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    raise InvalidFormat(
        f"Entry {dotted!r} in table {name!r} of {path} must be a string, integer, or boolean;"
        f" quote {type(value).__name__} values to keep their spelling"
    )
