"""Tag strategy reading the global variable slot of the host configuration store."""

from __future__ import annotations

from typing import Final

from ...application.ports import ConfigurationStore

ENVIRONMENT_TAG_VARIABLE: Final[str] = "environment_tag"


class StoreVariableTagStrategy:
    """Read the environment tag from a well-known store global variable.

    An absent entry yields ``""``.

    Examples
    --------
    >>> from lib_tagged_config.adapters.stores.memory import InMemoryConfigurationStore
    >>> store = InMemoryConfigurationStore(global_variables={'environment_tag': 'Prod'})
    >>> StoreVariableTagStrategy(store).get_tag()
    'Prod'
    """

    def __init__(self, store: ConfigurationStore, variable: str = ENVIRONMENT_TAG_VARIABLE) -> None:
        self.store = store
        self.variable = variable

    def get_tag(self) -> str:
        return self.store.global_variable(self.variable) or ""

    def __repr__(self) -> str:
        return f"StoreVariableTagStrategy({self.variable!r})"
