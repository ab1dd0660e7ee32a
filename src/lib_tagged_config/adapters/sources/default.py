"""Key-value sources.

Purpose
-------
Implement :class:`lib_tagged_config.application.ports.KeyValueSource`: select
the collection searched for a qualified key.

Contents
--------
* :class:`AppSettingsSource` – the store's settings table.
* :class:`ConnectionStringsSource` – the store's connection-strings table.
* :class:`MappingSource` – a caller-supplied table or zero-argument callable,
  for sources outside the host store (hand-built tables, databases, remote
  services).

Every call re-reads the underlying data and returns a fresh ``dict``.
"""

from __future__ import annotations

from typing import Callable, Mapping

from ...application.ports import ConfigurationStore


class AppSettingsSource:
    """Return the full settings table of the configuration store."""

    def get_collection(self, store: ConfigurationStore) -> dict[str, str]:
        return dict(store.app_settings())

    def __repr__(self) -> str:
        return "AppSettingsSource()"


class ConnectionStringsSource:
    """Return the full connection-strings table of the configuration store."""

    def get_collection(self, store: ConfigurationStore) -> dict[str, str]:
        return dict(store.connection_strings())

    def __repr__(self) -> str:
        return "ConnectionStringsSource()"


class MappingSource:
    """Wrap a mapping or a callable returning one; the store is ignored.

    Examples
    --------
    >>> MappingSource({"QA.Limit": "5"}).get_collection(None)
    {'QA.Limit': '5'}
    >>> MappingSource(lambda: {"QA.Limit": "6"}).get_collection(None)
    {'QA.Limit': '6'}
    """

    def __init__(self, data: Mapping[str, str] | Callable[[], Mapping[str, str]]) -> None:
        self._data = data

    def get_collection(self, store: ConfigurationStore | None) -> dict[str, str]:
        data = self._data() if callable(self._data) else self._data
        return dict(data)

    def __repr__(self) -> str:
        return "MappingSource()"
