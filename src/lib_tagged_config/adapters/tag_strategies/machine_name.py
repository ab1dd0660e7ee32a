"""Tag strategy mapping the machine name to an environment tag."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ...application.ports import SystemEnvironment
from ...domain.errors import MachineNameNotMapped
from ...observability import log_debug
from ..system.default import DefaultSystemEnvironment


class MachineNameTagStrategy:
    """Look up the current host name in a caller-supplied ``name -> tag`` map.

    The map is copied at construction time and stays frozen for the lifetime
    of the strategy. Host names are matched exactly.

    Examples
    --------
    >>> system = DefaultSystemEnvironment(hostname='build-01')
    >>> MachineNameTagStrategy({'build-01': 'QA'}, system=system).get_tag()
    'QA'
    """

    def __init__(self, machine_names: Mapping[str, str], *, system: SystemEnvironment | None = None) -> None:
        self._machine_names: Mapping[str, str] = MappingProxyType(dict(machine_names))
        self._system = system or DefaultSystemEnvironment()

    @property
    def machine_names(self) -> Mapping[str, str]:
        return self._machine_names

    def get_tag(self) -> str:
        """Return the tag mapped to the current machine name.

        Raises
        ------
        MachineNameNotMapped
            When the host name has no entry in the map.
        """

        machine_name = self._system.get_machine_name()
        try:
            tag = self._machine_names[machine_name]
        except KeyError:
            log_debug("machine_name_unmapped", source="MachineNameTagStrategy", key=machine_name)
            raise MachineNameNotMapped(machine_name) from None
        return tag

    def __repr__(self) -> str:
        return f"MachineNameTagStrategy({dict(self._machine_names)!r})"
