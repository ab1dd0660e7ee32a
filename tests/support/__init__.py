"""Shared test doubles and store fixtures.

The spies record call order so tests can prove that preconditions fire before
any tag is resolved or any collection is fetched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from lib_tagged_config.application.ports import ConfigurationStore, EnvironmentTarget

STORE_TOML = """\
[global_variables]
environment_tag = "Dev"

[app_settings]
"Dev.Setting" = "x"
"QA.Setting" = "y"

[app_settings.Prod]
Setting = "z"
Retries = 3

[connection_strings]
"Dev.MyConn" = "server=dev-db;database=app"
"QA.MyConn" = "server=qa-db;database=app"
"""


def write_store(directory: Path, body: str = STORE_TOML, *, name: str = "store.toml") -> Path:
    """Write *body* into ``directory / name`` and return the path."""

    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


@dataclass
class CallLog:
    """Ordered record of collaborator calls shared between spies."""

    calls: list[str] = field(default_factory=list)


class SpyTagStrategy:
    """Tag strategy returning a fixed tag and recording each call."""

    def __init__(self, tag: str | None, log: CallLog | None = None) -> None:
        self.tag = tag
        self.log = log or CallLog()

    def get_tag(self) -> str | None:
        self.log.calls.append("get_tag")
        return self.tag


class SpySource:
    """Key-value source returning a fixed collection and recording each call."""

    def __init__(self, collection: Mapping[str, str], log: CallLog | None = None) -> None:
        self.collection = dict(collection)
        self.log = log or CallLog()
        self.stores: list[ConfigurationStore] = []

    def get_collection(self, store: ConfigurationStore) -> dict[str, str]:
        self.log.calls.append("get_collection")
        self.stores.append(store)
        return dict(self.collection)


@dataclass
class FakeSystem:
    """Deterministic :class:`SystemEnvironment` double."""

    variables: dict[tuple[str, EnvironmentTarget], str] = field(default_factory=dict)
    machine_name: str = "host-a"

    def get_environment_variable(self, name: str, target: EnvironmentTarget) -> str | None:
        return self.variables.get((name, target))

    def get_machine_name(self) -> str:
        return self.machine_name
