"""Environment tag strategies."""

from __future__ import annotations

from .environment import DEFAULT_TAG_VARIABLE, EnvironmentVariableTagStrategy
from .files import DefaultFileSettings, FileTagStrategy, PathFileSettings, TextFileTagStrategy
from .fixed import FixedTagStrategy
from .machine_name import MachineNameTagStrategy
from .store import ENVIRONMENT_TAG_VARIABLE, StoreVariableTagStrategy

__all__ = [
    "DEFAULT_TAG_VARIABLE",
    "ENVIRONMENT_TAG_VARIABLE",
    "DefaultFileSettings",
    "EnvironmentVariableTagStrategy",
    "FileTagStrategy",
    "FixedTagStrategy",
    "MachineNameTagStrategy",
    "PathFileSettings",
    "StoreVariableTagStrategy",
    "TextFileTagStrategy",
]
