"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by tag strategies, key-value sources,
configuration stores, and the resolution engine. The hierarchy lives in the
domain layer so adapters may depend on it without importing the composition
root.

Contents
--------
* :class:`TaggedConfigError` – umbrella base class for all library failures.
* :class:`InvalidKey` – the logical key or name is empty or ``None``.
* :class:`ConfigurationMissing` – a collaborator was not supplied before a
  call (:class:`TagStrategyNotSet`, :class:`ConfigurationStoreNotSet`).
* :class:`FileSettingsNotSet` – a file-backed tag strategy has no file settings.
* :class:`TagNotFound` – the tag strategy produced an empty tag.
* :class:`KeyNotFound` – the qualified key is absent or maps to an empty value.
* :class:`MachineNameNotMapped` – the host name has no entry in the tag map.
* :class:`InvalidFormat` / :class:`NotFound` – store file and tag file problems.

System Role
-----------
Every failure is raised at the point of detection and propagates unchanged to
the caller. Callers catch :class:`TaggedConfigError` to handle all library
failures uniformly, or a concrete subclass for targeted handling.
"""

from __future__ import annotations


class TaggedConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_tagged_config``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidKey(TaggedConfigError, ValueError):
    """Raised when the logical key or connection name is empty or ``None``.

    Subclasses :class:`ValueError` so generic argument validation handlers keep
    working.
    """

    def __init__(self, argument: str = "key") -> None:
        self.argument = argument
        super().__init__(f"Argument {argument!r} must be a non-empty string")


class ConfigurationMissing(TaggedConfigError):
    """A required collaborator was not configured before resolution started."""


class TagStrategyNotSet(ConfigurationMissing):
    """No tag strategy was supplied to the resolution engine."""

    def __init__(self) -> None:
        super().__init__("No tag strategy configured; provide one before resolving values")


class ConfigurationStoreNotSet(ConfigurationMissing):
    """No configuration store was supplied to the resolution engine."""

    def __init__(self) -> None:
        super().__init__("No configuration store configured; provide one before resolving values")


class FileSettingsNotSet(TaggedConfigError):
    """A file-backed tag strategy was invoked without file settings.

    Why
    ----
    The storage location of the tag file is mandatory; without it the strategy
    cannot create or read anything.
    """

    def __init__(self) -> None:
        super().__init__("No file settings configured; provide the tag storage file location before reading the tag")


class TagNotFound(TaggedConfigError, LookupError):
    """The configured tag strategy returned an empty environment tag.

    Attributes
    ----------
    strategy:
        Class name of the strategy that produced the empty tag.
    key:
        Logical key being resolved, ``None`` when only the tag was requested.
    """

    def __init__(self, strategy: str, key: str | None = None) -> None:
        self.strategy = strategy
        self.key = key
        message = f"Could not find an environment tag using {strategy}"
        if key is not None:
            message += f" while resolving {key!r}"
        super().__init__(message)


class KeyNotFound(TaggedConfigError, LookupError):
    """The qualified key is absent from the collection or maps to an empty value.

    Attributes
    ----------
    qualified_key:
        The literal ``<tag>.<key>`` string that was looked up.
    """

    def __init__(self, qualified_key: str) -> None:
        self.qualified_key = qualified_key
        super().__init__(f"Could not find a configuration entry with the key {qualified_key!r}")


class MachineNameNotMapped(TaggedConfigError, LookupError):
    """The current machine name has no entry in the machine-name map."""

    def __init__(self, machine_name: str) -> None:
        self.machine_name = machine_name
        super().__init__(f"Machine name {machine_name!r} is not mapped to an environment tag")


class InvalidFormat(TaggedConfigError):
    """Raised when a store file cannot be parsed into string tables.

    Typical Sources
    ---------------
    Structured file loaders (:mod:`tomllib`, :mod:`json`, :mod:`yaml`) and the
    table flattening performed by the file configuration store.
    """


class NotFound(TaggedConfigError):
    """A store file or tag storage file is not a readable file at its location."""
