"""Operating system facade.

Purpose
-------
Implement the :class:`lib_tagged_config.application.ports.SystemEnvironment`
protocol: read environment variables in a given scope and report the machine
name. Tag strategies depend on the protocol so tests can inject deterministic
values instead of touching the real process.

Key behaviours
--------------
* ``PROCESS`` scope reads :data:`os.environ` (or the injected mapping).
* ``USER`` / ``MACHINE`` scopes read the registry-backed environment on
  Windows and fall back to the process environment elsewhere, where no such
  persistent scopes exist.
* The machine name comes from :func:`socket.gethostname` unless injected.
"""

from __future__ import annotations

import os
import socket
import sys
from typing import Mapping

from ...application.ports import EnvironmentTarget
from ...observability import log_debug

_WINDOWS_ENVIRONMENT_KEYS = {
    EnvironmentTarget.USER: ("HKEY_CURRENT_USER", r"Environment"),
    EnvironmentTarget.MACHINE: (
        "HKEY_LOCAL_MACHINE",
        r"SYSTEM\CurrentControlSet\Control\Session Manager\Environment",
    ),
}


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('lib-tagged-config')
    'LIB_TAGGED_CONFIG'
    """

    return slug.replace("-", "_").upper()


class DefaultSystemEnvironment:
    """Read environment variables and the machine name from the running host."""

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        hostname: str | None = None,
        platform: str | None = None,
    ) -> None:
        """Initialise the facade with optional overrides for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        hostname:
            Machine name to report. Defaults to :func:`socket.gethostname`.
        platform:
            Platform identifier (``sys.platform`` clone) deciding whether the
            Windows registry scopes are consulted.
        """

        self._environ = os.environ if environ is None else environ
        self._hostname = hostname
        self._platform = platform or sys.platform

    def get_environment_variable(self, name: str, target: EnvironmentTarget = EnvironmentTarget.PROCESS) -> str | None:
        """Return the variable *name* from *target* scope, or ``None``.

        Examples
        --------
        >>> system = DefaultSystemEnvironment(environ={'APP_TAG': 'QA'})
        >>> system.get_environment_variable('APP_TAG')
        'QA'
        >>> system.get_environment_variable('MISSING') is None
        True
        """

        target = EnvironmentTarget(target)
        if target is not EnvironmentTarget.PROCESS and self._platform.startswith("win"):
            value = _read_windows_scope(name, target)  # pragma: no cover - registry only on Windows
        else:
            value = self._environ.get(name)
        log_debug("environment_variable_read", source="system", key=name, target=target.value, found=value is not None)
        return value

    def get_machine_name(self) -> str:
        """Return the configured or detected machine name."""

        return self._hostname or socket.gethostname()


def _read_windows_scope(name: str, target: EnvironmentTarget) -> str | None:  # pragma: no cover - Windows only
    """Read *name* from the registry key backing *target* scope."""

    import winreg

    hive_name, subkey = _WINDOWS_ENVIRONMENT_KEYS[target]
    hive = getattr(winreg, hive_name)
    try:
        with winreg.OpenKey(hive, subkey) as handle:
            value, _kind = winreg.QueryValueEx(handle, name)
    except FileNotFoundError:
        return None
    return str(value)
