"""Tag strategy adapter tests.

Each variant is exercised against deterministic system doubles so no real
environment variable or host name leaks into the assertions.
"""

from __future__ import annotations

import pytest

from lib_tagged_config import (
    DefaultSystemEnvironment,
    EnvironmentTarget,
    EnvironmentVariableTagStrategy,
    FixedTagStrategy,
    InMemoryConfigurationStore,
    MachineNameNotMapped,
    MachineNameTagStrategy,
    StoreVariableTagStrategy,
    TaggedConfig,
    TagNotFound,
)
from lib_tagged_config.adapters.tag_strategies import DEFAULT_TAG_VARIABLE, ENVIRONMENT_TAG_VARIABLE
from tests.support import FakeSystem


def test_fixed_strategy_returns_constructor_value() -> None:
    assert FixedTagStrategy("Dev").get_tag() == "Dev"
    assert FixedTagStrategy("Dev").tag == "Dev"


def test_environment_variable_strategy_reads_target_scope() -> None:
    system = FakeSystem(
        variables={
            ("APP_ENV", EnvironmentTarget.PROCESS): "Dev",
            ("APP_ENV", EnvironmentTarget.MACHINE): "Prod",
        }
    )
    assert EnvironmentVariableTagStrategy("APP_ENV", system=system).get_tag() == "Dev"
    assert EnvironmentVariableTagStrategy("APP_ENV", EnvironmentTarget.MACHINE, system=system).get_tag() == "Prod"
    assert EnvironmentVariableTagStrategy("APP_ENV", "user", system=system).get_tag() == ""


def test_environment_variable_strategy_default_variable() -> None:
    assert DEFAULT_TAG_VARIABLE == "LIB_TAGGED_CONFIG_ENVIRONMENT_TAG"
    system = DefaultSystemEnvironment(environ={DEFAULT_TAG_VARIABLE: "QA"})
    assert EnvironmentVariableTagStrategy(system=system).get_tag() == "QA"


def test_environment_variable_strategy_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("LIB_TAGGED_CONFIG_TEST_TAG", "Staging")
    assert EnvironmentVariableTagStrategy("LIB_TAGGED_CONFIG_TEST_TAG").get_tag() == "Staging"


def test_absent_environment_variable_surfaces_as_tag_not_found() -> None:
    strategy = EnvironmentVariableTagStrategy("APP_ENV", system=FakeSystem())
    config = TaggedConfig(tag_strategy=strategy, store=InMemoryConfigurationStore(app_settings={".Setting": "x"}))
    with pytest.raises(TagNotFound, match="EnvironmentVariableTagStrategy"):
        config.get_app_setting("Setting")


def test_machine_name_strategy_maps_host() -> None:
    strategy = MachineNameTagStrategy({"host-a": "Dev"}, system=FakeSystem(machine_name="host-a"))
    assert strategy.get_tag() == "Dev"


def test_machine_name_strategy_unmapped_host_raises() -> None:
    strategy = MachineNameTagStrategy({"host-a": "Dev"}, system=FakeSystem(machine_name="host-b"))
    with pytest.raises(MachineNameNotMapped) as excinfo:
        strategy.get_tag()
    assert excinfo.value.machine_name == "host-b"


def test_machine_name_map_is_frozen_copy() -> None:
    names = {"host-a": "Dev"}
    strategy = MachineNameTagStrategy(names, system=FakeSystem(machine_name="host-a"))
    names["host-a"] = "Prod"
    assert strategy.get_tag() == "Dev"
    with pytest.raises(TypeError):
        strategy.machine_names["host-a"] = "QA"  # type: ignore[index]


def test_machine_name_strategy_uses_real_hostname_by_default(monkeypatch) -> None:
    monkeypatch.setattr("socket.gethostname", lambda: "ci-runner")
    assert MachineNameTagStrategy({"ci-runner": "CI"}).get_tag() == "CI"


def test_store_variable_strategy() -> None:
    store = InMemoryConfigurationStore(global_variables={ENVIRONMENT_TAG_VARIABLE: "Prod", "region": "eu"})
    assert StoreVariableTagStrategy(store).get_tag() == "Prod"
    assert StoreVariableTagStrategy(store, "region").get_tag() == "eu"
    assert StoreVariableTagStrategy(InMemoryConfigurationStore()).get_tag() == ""
