"""In-memory configuration store."""

from __future__ import annotations

from typing import Mapping


class InMemoryConfigurationStore:
    """Configuration store backed by plain dictionaries.

    The tables are copied at construction time; every accessor returns a fresh
    ``dict`` so callers cannot mutate the store through a returned collection.

    Examples
    --------
    >>> store = InMemoryConfigurationStore(app_settings={"Dev.Setting": "x"})
    >>> store.app_settings()
    {'Dev.Setting': 'x'}
    >>> store.global_variable("environment_tag") is None
    True
    """

    def __init__(
        self,
        *,
        app_settings: Mapping[str, str] | None = None,
        connection_strings: Mapping[str, str] | None = None,
        global_variables: Mapping[str, str] | None = None,
    ) -> None:
        self._app_settings = dict(app_settings or {})
        self._connection_strings = dict(connection_strings or {})
        self._global_variables = dict(global_variables or {})

    def app_settings(self) -> dict[str, str]:
        return dict(self._app_settings)

    def connection_strings(self) -> dict[str, str]:
        return dict(self._connection_strings)

    def global_variable(self, name: str) -> str | None:
        return self._global_variables.get(name)
