"""Public package surface for environment-qualified configuration lookups.

``lib_tagged_config`` resolves a logical key such as ``"Setting"`` to the value
stored under ``"<tag>.Setting"``, where the environment tag (``"Dev"``,
``"QA"``, ``"Prod"`` ...) comes from a pluggable tag strategy and the values
come from a pluggable key-value source.
"""

from __future__ import annotations

from .adapters.sources.default import AppSettingsSource, ConnectionStringsSource, MappingSource
from .adapters.stores import FileConfigurationStore, InMemoryConfigurationStore
from .adapters.system.default import DefaultSystemEnvironment, default_env_prefix
from .adapters.tag_strategies import (
    DefaultFileSettings,
    EnvironmentVariableTagStrategy,
    FileTagStrategy,
    FixedTagStrategy,
    MachineNameTagStrategy,
    PathFileSettings,
    StoreVariableTagStrategy,
    TextFileTagStrategy,
)
from .application.ports import (
    ConfigurationStore,
    EnvironmentTarget,
    FileSettings,
    KeyValueSource,
    SystemEnvironment,
    TagStrategy,
)
from .core import TaggedConfig, resolve_value
from .domain.errors import (
    ConfigurationMissing,
    ConfigurationStoreNotSet,
    FileSettingsNotSet,
    InvalidFormat,
    InvalidKey,
    KeyNotFound,
    MachineNameNotMapped,
    NotFound,
    TaggedConfigError,
    TagNotFound,
    TagStrategyNotSet,
)
from .domain.keys import qualify_key, strip_tag
from .observability import bind_trace_id, get_logger

__all__ = [
    "AppSettingsSource",
    "ConfigurationMissing",
    "ConfigurationStore",
    "ConfigurationStoreNotSet",
    "ConnectionStringsSource",
    "DefaultFileSettings",
    "DefaultSystemEnvironment",
    "EnvironmentTarget",
    "EnvironmentVariableTagStrategy",
    "FileConfigurationStore",
    "FileSettings",
    "FileSettingsNotSet",
    "FileTagStrategy",
    "FixedTagStrategy",
    "InMemoryConfigurationStore",
    "InvalidFormat",
    "InvalidKey",
    "KeyNotFound",
    "KeyValueSource",
    "MachineNameNotMapped",
    "MachineNameTagStrategy",
    "MappingSource",
    "NotFound",
    "PathFileSettings",
    "StoreVariableTagStrategy",
    "SystemEnvironment",
    "TagNotFound",
    "TagStrategy",
    "TagStrategyNotSet",
    "TaggedConfig",
    "TaggedConfigError",
    "TextFileTagStrategy",
    "bind_trace_id",
    "default_env_prefix",
    "get_logger",
    "qualify_key",
    "resolve_value",
    "strip_tag",
]
