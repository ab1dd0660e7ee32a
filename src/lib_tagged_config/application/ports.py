"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts that adapters must satisfy so the resolution
engine can orchestrate behaviour without depending on concrete
implementations.

Contents
--------
* :class:`TagStrategy` – produces the current environment tag.
* :class:`ConfigurationStore` – read-only host settings storage.
* :class:`KeyValueSource` – selects a key-value collection from a store.
* :class:`SystemEnvironment` – environment variables and machine name.
* :class:`FileSettings` – location of the tag storage file.

System Role
-----------
These protocols enforce Dependency Inversion. Each adapter implements one
protocol; callers may plug in their own implementation of any of them.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable


class EnvironmentTarget(str, Enum):
    """Scope searched when reading an environment variable."""

    PROCESS = "process"
    USER = "user"
    MACHINE = "machine"


@runtime_checkable
class TagStrategy(Protocol):
    """Discover the current environment tag (``"Dev"``, ``"QA"``, ``"Prod"`` ...).

    Implementations return an empty string when no tag is available; the
    resolution engine turns that into :class:`TagNotFound`.
    """

    def get_tag(self) -> str:
        """Return the current environment tag, or ``""`` when none is set."""


@runtime_checkable
class ConfigurationStore(Protocol):
    """Read-only view of the host application's settings storage.

    Why
    ----
    Mirrors the two named sections of a host configuration (settings and
    connection strings) plus the global variable slot used by
    :class:`~lib_tagged_config.adapters.tag_strategies.store.StoreVariableTagStrategy`.
    """

    def app_settings(self) -> Mapping[str, str]:
        """Return the flat settings table."""

    def connection_strings(self) -> Mapping[str, str]:
        """Return the connection-strings table keyed by connection name."""

    def global_variable(self, name: str) -> str | None:
        """Return the global variable *name* or ``None`` when absent."""


@runtime_checkable
class KeyValueSource(Protocol):
    """Produce the full mapping searched for a qualified key."""

    def get_collection(self, store: ConfigurationStore) -> Mapping[str, str]:
        """Return the complete collection; called once per resolution."""


@runtime_checkable
class SystemEnvironment(Protocol):
    """Facade over operating system lookups."""

    def get_environment_variable(self, name: str, target: EnvironmentTarget) -> str | None:
        """Return the variable *name* in *target* scope or ``None``."""

    def get_machine_name(self) -> str:
        """Return the host name of the current machine."""


@runtime_checkable
class FileSettings(Protocol):
    """Locate the file holding the environment tag."""

    @property
    def tag_storage_file_path(self) -> Path:
        """Absolute path of the tag storage file."""
