"""Tag strategy reading an operating system environment variable.

The variable name defaults to ``LIB_TAGGED_CONFIG_ENVIRONMENT_TAG`` (the package
prefix from :func:`default_env_prefix` plus ``_ENVIRONMENT_TAG``). An absent
variable yields ``""`` so the resolution engine reports :class:`TagNotFound`.
"""

from __future__ import annotations

from typing import Final

from ...application.ports import EnvironmentTarget, SystemEnvironment
from ..system.default import DefaultSystemEnvironment, default_env_prefix

DEFAULT_TAG_VARIABLE: Final[str] = f"{default_env_prefix('lib-tagged-config')}_ENVIRONMENT_TAG"


class EnvironmentVariableTagStrategy:
    """Read the environment tag from a named variable in a given scope.

    Examples
    --------
    >>> system = DefaultSystemEnvironment(environ={'DEPLOY_ENV': 'Prod'})
    >>> EnvironmentVariableTagStrategy('DEPLOY_ENV', system=system).get_tag()
    'Prod'
    >>> EnvironmentVariableTagStrategy('UNSET', system=system).get_tag()
    ''
    """

    def __init__(
        self,
        variable: str = DEFAULT_TAG_VARIABLE,
        target: EnvironmentTarget = EnvironmentTarget.PROCESS,
        *,
        system: SystemEnvironment | None = None,
    ) -> None:
        self.variable = variable
        self.target = EnvironmentTarget(target)
        self._system = system or DefaultSystemEnvironment()

    def get_tag(self) -> str:
        return self._system.get_environment_variable(self.variable, self.target) or ""

    def __repr__(self) -> str:
        return f"EnvironmentVariableTagStrategy({self.variable!r}, {self.target.value!r})"
