"""Adapter contract tests for the default ports implementation.

Verify the shipped adapters keep satisfying the protocols defined in
``src/lib_tagged_config/application/ports.py`` so callers can swap them for
their own implementations.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_tagged_config.adapters.sources.default import AppSettingsSource, ConnectionStringsSource, MappingSource
from lib_tagged_config.adapters.stores import FileConfigurationStore, InMemoryConfigurationStore
from lib_tagged_config.adapters.system.default import DefaultSystemEnvironment
from lib_tagged_config.adapters.tag_strategies import (
    DefaultFileSettings,
    EnvironmentVariableTagStrategy,
    FixedTagStrategy,
    MachineNameTagStrategy,
    PathFileSettings,
    StoreVariableTagStrategy,
    TextFileTagStrategy,
)
from lib_tagged_config.application import ports
from tests.support import FakeSystem


@pytest.mark.parametrize(
    "strategy",
    [
        FixedTagStrategy("Dev"),
        EnvironmentVariableTagStrategy("APP_ENV", system=FakeSystem()),
        MachineNameTagStrategy({}, system=FakeSystem()),
        TextFileTagStrategy(PathFileSettings("tag.txt")),
        StoreVariableTagStrategy(InMemoryConfigurationStore()),
    ],
    ids=repr,
)
def test_tag_strategies_satisfy_protocol(strategy) -> None:
    assert isinstance(strategy, ports.TagStrategy)


@pytest.mark.parametrize("source", [AppSettingsSource(), ConnectionStringsSource(), MappingSource({})], ids=repr)
def test_sources_satisfy_protocol(source) -> None:
    assert isinstance(source, ports.KeyValueSource)


def test_stores_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(InMemoryConfigurationStore(), ports.ConfigurationStore)
    assert isinstance(FileConfigurationStore(tmp_path / "store.toml"), ports.ConfigurationStore)


def test_system_and_file_settings_satisfy_protocols() -> None:
    assert isinstance(DefaultSystemEnvironment(environ={}), ports.SystemEnvironment)
    assert isinstance(FakeSystem(), ports.SystemEnvironment)
    assert isinstance(PathFileSettings("tag.txt"), ports.FileSettings)
    assert isinstance(DefaultFileSettings(vendor="Acme", app="Demo", slug="demo"), ports.FileSettings)
