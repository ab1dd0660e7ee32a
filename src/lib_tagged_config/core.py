"""Composition root for ``lib_tagged_config``.

Purpose
-------
Provide the single point where a tag strategy, a configuration store, and a
key-value source are combined into an environment-qualified lookup.

Contents
--------
* :func:`resolve_value` – the resolution algorithm as a pure function of its
  explicit arguments.
* :class:`TaggedConfig` – immutable value object holding the selected tag
  strategy and store, exposing the caller-facing operations.

System Role
-----------
Resolution happens in a fixed order: verify collaborators, validate the key,
resolve the tag, compose ``<tag>.<key>``, fetch the collection, look the key
up. Each step raises a typed error from :mod:`lib_tagged_config.domain.errors`
at the point of detection. Nothing is cached; every call re-resolves the tag
and re-fetches the collection.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from .adapters.sources.default import AppSettingsSource, ConnectionStringsSource
from .adapters.stores.file import FileConfigurationStore
from .adapters.tag_strategies.store import StoreVariableTagStrategy
from .application.ports import ConfigurationStore, KeyValueSource, TagStrategy
from .domain.errors import (
    ConfigurationStoreNotSet,
    InvalidKey,
    KeyNotFound,
    TagNotFound,
    TagStrategyNotSet,
)
from .domain.keys import qualify_key, strip_tag
from .observability import log_debug, log_error, make_event


def resolve_value(
    key: str | None,
    source: KeyValueSource,
    *,
    tag_strategy: TagStrategy | None,
    store: ConfigurationStore | None,
    argument: str = "key",
) -> str:
    """Return the value stored under ``<tag>.<key>`` in *source*.

    Parameters
    ----------
    key:
        Logical key (app-setting name, connection name, custom key).
    source:
        Key-value source providing the collection to search.
    tag_strategy:
        Strategy producing the current environment tag.
    store:
        Configuration store handed to ``source.get_collection``.
    argument:
        Argument name reported by :class:`InvalidKey`.

    Raises
    ------
    TagStrategyNotSet / ConfigurationStoreNotSet
        When a collaborator is ``None``; raised before anything else runs.
    InvalidKey
        When *key* is empty or ``None``; raised before the tag is resolved.
    TagNotFound
        When the strategy returns an empty tag.
    KeyNotFound
        When the qualified key is absent or mapped to ``""``.

    Examples
    --------
    >>> from lib_tagged_config.adapters.stores.memory import InMemoryConfigurationStore
    >>> from lib_tagged_config.adapters.tag_strategies.fixed import FixedTagStrategy
    >>> store = InMemoryConfigurationStore(app_settings={"Dev.Setting": "x"})
    >>> resolve_value("Setting", AppSettingsSource(), tag_strategy=FixedTagStrategy("Dev"), store=store)
    'x'
    """

    _verify_collaborators(tag_strategy, store)
    if not key:
        raise InvalidKey(argument)

    tag = _resolve_tag(tag_strategy, key)
    qualified = qualify_key(tag, key)
    collection = _fetch(source, store)
    value = collection.get(qualified)
    if not value:
        log_error("value_missing", **make_event(type(source).__name__, qualified))
        raise KeyNotFound(qualified)
    log_debug("value_resolved", **make_event(type(source).__name__, qualified))
    return value


@dataclass(frozen=True, slots=True)
class TaggedConfig:
    """Immutable pairing of a tag strategy and a configuration store.

    Why
    ----
    Holding the selection in a frozen value lets concurrent callers share one
    instance without observing each other's choices; switching strategy means
    building a new instance via :meth:`with_tag_strategy` / :meth:`with_store`.

    Examples
    --------
    >>> from lib_tagged_config.adapters.stores.memory import InMemoryConfigurationStore
    >>> from lib_tagged_config.adapters.tag_strategies.fixed import FixedTagStrategy
    >>> config = TaggedConfig(
    ...     tag_strategy=FixedTagStrategy("Dev"),
    ...     store=InMemoryConfigurationStore(
    ...         app_settings={"Dev.Setting": "x", "QA.Setting": "y"},
    ...         connection_strings={"Dev.MyConn": "server=dev"},
    ...     ),
    ... )
    >>> config.get_app_setting("Setting")
    'x'
    >>> config.get_connection_string("MyConn")
    'server=dev'
    >>> config.get_all_app_settings(current_environment=True)
    {'Setting': 'x'}
    """

    tag_strategy: TagStrategy | None = None
    store: ConfigurationStore | None = None

    @classmethod
    def from_file(cls, path: str | Path, tag_strategy: TagStrategy | None = None) -> "TaggedConfig":
        """Build a config reading *path* as the store.

        Without *tag_strategy* the tag comes from the store's
        ``global_variables.environment_tag`` entry.
        """

        store = FileConfigurationStore(path)
        return cls(tag_strategy=tag_strategy or StoreVariableTagStrategy(store), store=store)

    def with_tag_strategy(self, tag_strategy: TagStrategy | None) -> "TaggedConfig":
        return replace(self, tag_strategy=tag_strategy)

    def with_store(self, store: ConfigurationStore | None) -> "TaggedConfig":
        return replace(self, store=store)

    def current_tag(self) -> str:
        """Resolve and return the current environment tag."""

        if self.tag_strategy is None:
            raise TagStrategyNotSet()
        return _resolve_tag(self.tag_strategy)

    def get_app_setting(self, key: str | None) -> str:
        """Return the app setting *key* for the current environment."""

        return resolve_value(key, AppSettingsSource(), tag_strategy=self.tag_strategy, store=self.store)

    def get_connection_string(self, name: str | None) -> str:
        """Return the connection string *name* for the current environment."""

        return resolve_value(
            name, ConnectionStringsSource(), tag_strategy=self.tag_strategy, store=self.store, argument="name"
        )

    def get_custom(self, key: str | None, source: KeyValueSource) -> str:
        """Return *key* for the current environment from a caller-supplied *source*."""

        return resolve_value(key, source, tag_strategy=self.tag_strategy, store=self.store)

    def get_all_app_settings(self, *, current_environment: bool = False) -> dict[str, str]:
        """Return every app setting.

        With ``current_environment=True`` only the entries of the current tag
        are returned, keyed without the ``<tag>.`` prefix.
        """

        return self._read_all(AppSettingsSource(), current_environment)

    def get_all_connection_strings(self, *, current_environment: bool = False) -> dict[str, str]:
        """Return every connection string; see :meth:`get_all_app_settings`."""

        return self._read_all(ConnectionStringsSource(), current_environment)

    def _read_all(self, source: KeyValueSource, current_environment: bool) -> dict[str, str]:
        if current_environment and self.tag_strategy is None:
            raise TagStrategyNotSet()
        if self.store is None:
            raise ConfigurationStoreNotSet()
        if not current_environment:
            return _fetch(source, self.store)
        tag = _resolve_tag(self.tag_strategy)
        return strip_tag(tag, _fetch(source, self.store))


def _verify_collaborators(tag_strategy: TagStrategy | None, store: ConfigurationStore | None) -> None:
    if tag_strategy is None:
        raise TagStrategyNotSet()
    if store is None:
        raise ConfigurationStoreNotSet()


def _resolve_tag(tag_strategy: TagStrategy, key: str | None = None) -> str:
    strategy_name = type(tag_strategy).__name__
    tag = tag_strategy.get_tag()
    if not tag:
        log_error("tag_missing", **make_event(strategy_name, key))
        raise TagNotFound(strategy_name, key)
    log_debug("tag_resolved", **make_event(strategy_name, None, {"tag": tag}))
    return tag


def _fetch(source: KeyValueSource, store: ConfigurationStore) -> dict[str, str]:
    collection: Mapping[str, str] = source.get_collection(store)
    log_debug("collection_fetched", **make_event(type(source).__name__, None, {"entries": len(collection)}))
    return dict(collection)


__all__ = ["TaggedConfig", "resolve_value"]
