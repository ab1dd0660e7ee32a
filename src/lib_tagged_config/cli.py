"""CLI adapter for ``lib_tagged_config`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators inspect which environment a machine resolves to and which values
it sees, without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_tag` – prints the resolved environment tag.
* :func:`cli_get` – resolves one app setting or connection string.
* :func:`cli_list` – dumps a whole table as JSON.
* :func:`cli_set_tag` – writes a tag into a text tag file.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer: builds a tag strategy and a store from options, hands them to
:class:`lib_tagged_config.core.TaggedConfig`, and lets every library error
propagate to ``lib_cli_exit_tools`` for uniform exit codes.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Any, Callable, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.stores.file import FileConfigurationStore
from .adapters.tag_strategies import (
    DEFAULT_TAG_VARIABLE,
    EnvironmentVariableTagStrategy,
    FixedTagStrategy,
    MachineNameTagStrategy,
    PathFileSettings,
    StoreVariableTagStrategy,
    TextFileTagStrategy,
)
from .application.ports import EnvironmentTarget, TagStrategy
from .core import TaggedConfig

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DISTRIBUTION: Final[str] = "lib_tagged_config"
STORE_ENVVAR: Final[str] = "LIB_TAGGED_CONFIG_STORE"

TARGET_CHOICES: Final[tuple[str, ...]] = tuple(target.value for target in EnvironmentTarget)


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Environment-tagged configuration resolver",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=_DISTRIBUTION,
    message="lib_tagged_config version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


def _strategy_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the store and tag strategy options shared by the lookup commands."""

    options = (
        click.option(
            "--store",
            "store_path",
            envvar=STORE_ENVVAR,
            type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False, readable=True),
            default=None,
            help=f"Configuration store file (.toml/.json/.yaml); defaults to ${STORE_ENVVAR}",
        ),
        click.option("--fixed", default=None, help="Use a fixed environment tag"),
        click.option(
            "--env-var",
            default=None,
            help=f"Read the tag from this environment variable (e.g. {DEFAULT_TAG_VARIABLE})",
        ),
        click.option(
            "--env-target",
            type=click.Choice(TARGET_CHOICES, case_sensitive=False),
            default=EnvironmentTarget.PROCESS.value,
            show_default=True,
            help="Scope searched by --env-var",
        ),
        click.option(
            "--machine",
            "machines",
            multiple=True,
            metavar="HOST=TAG",
            help="Map a machine name to a tag (repeatable)",
        ),
        click.option(
            "--tag-file",
            type=click.Path(path_type=Path, dir_okay=False),
            default=None,
            help="Read the tag from this text file (created empty when missing)",
        ),
    )
    for option in reversed(options):
        func = option(func)
    return func


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        click.echo("lib_tagged_config (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DISTRIBUTION)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.11')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("tag", context_settings=CLICK_CONTEXT_SETTINGS)
@_strategy_options
def cli_tag(
    store_path: Optional[Path],
    fixed: Optional[str],
    env_var: Optional[str],
    env_target: str,
    machines: Sequence[str],
    tag_file: Optional[Path],
) -> None:
    """Print the environment tag resolved by the selected strategy.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> CliRunner().invoke(cli, ["tag", "--fixed", "QA"]).output.strip()
    'QA'
    """

    config = _build_config(store_path, fixed, env_var, env_target, machines, tag_file)
    click.echo(config.current_tag())


@cli.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--connection-string/--app-setting",
    "connection_string",
    default=False,
    help="Look KEY up among connection strings instead of app settings",
)
@_strategy_options
def cli_get(
    key: str,
    connection_string: bool,
    store_path: Optional[Path],
    fixed: Optional[str],
    env_var: Optional[str],
    env_target: str,
    machines: Sequence[str],
    tag_file: Optional[Path],
) -> None:
    """Resolve KEY for the current environment and print its value."""

    config = _require_store(_build_config(store_path, fixed, env_var, env_target, machines, tag_file))
    value = config.get_connection_string(key) if connection_string else config.get_app_setting(key)
    click.echo(value)


@cli.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--connection-strings/--app-settings",
    "connection_strings",
    default=False,
    help="List connection strings instead of app settings",
)
@click.option(
    "--current-environment/--all-environments",
    default=False,
    help="Only list entries of the current tag, without the tag prefix",
)
@click.option("--indent", type=int, default=None, help="Pretty-print JSON output with the provided indent size")
@_strategy_options
def cli_list(
    connection_strings: bool,
    current_environment: bool,
    indent: Optional[int],
    store_path: Optional[Path],
    fixed: Optional[str],
    env_var: Optional[str],
    env_target: str,
    machines: Sequence[str],
    tag_file: Optional[Path],
) -> None:
    """Print a whole table of the store as JSON."""

    config = _require_store(_build_config(store_path, fixed, env_var, env_target, machines, tag_file))
    if connection_strings:
        payload = config.get_all_connection_strings(current_environment=current_environment)
    else:
        payload = config.get_all_app_settings(current_environment=current_environment)
    click.echo(json.dumps(payload, indent=indent))


@cli.command("set-tag", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("tag")
@click.option(
    "--tag-file",
    type=click.Path(path_type=Path, dir_okay=False),
    required=True,
    help="Text file receiving the tag (directories are created as needed)",
)
def cli_set_tag(tag: str, tag_file: Path) -> None:
    """Write TAG into a text tag file read by ``--tag-file`` lookups."""

    if not tag.strip():
        raise click.BadParameter("Tag must not be empty", param_hint="TAG")
    TextFileTagStrategy(PathFileSettings(tag_file)).store_tag(tag)
    click.echo(str(tag_file))


def _build_config(
    store_path: Optional[Path],
    fixed: Optional[str],
    env_var: Optional[str],
    env_target: str,
    machines: Sequence[str],
    tag_file: Optional[Path],
) -> TaggedConfig:
    """Assemble a :class:`TaggedConfig` from command options."""

    store = FileConfigurationStore(store_path) if store_path is not None else None
    chosen: list[TagStrategy] = []
    if fixed is not None:
        chosen.append(FixedTagStrategy(fixed))
    if env_var is not None:
        chosen.append(EnvironmentVariableTagStrategy(env_var, EnvironmentTarget(env_target.lower())))
    if machines:
        chosen.append(MachineNameTagStrategy(_parse_machine_map(machines)))
    if tag_file is not None:
        chosen.append(TextFileTagStrategy(PathFileSettings(tag_file)))

    if len(chosen) > 1:
        raise click.UsageError("Tag strategy options are mutually exclusive")
    if chosen:
        return TaggedConfig(tag_strategy=chosen[0], store=store)
    if store is None:
        raise click.UsageError(f"Select a tag strategy or provide --store / ${STORE_ENVVAR}")
    return TaggedConfig(tag_strategy=StoreVariableTagStrategy(store), store=store)


def _require_store(config: TaggedConfig) -> TaggedConfig:
    if config.store is None:
        raise click.UsageError(f"A configuration store is required; pass --store or set ${STORE_ENVVAR}")
    return config


def _parse_machine_map(values: Sequence[str]) -> dict[str, str]:
    """Parse repeated ``HOST=TAG`` options into a mapping.

    Examples
    --------
    >>> _parse_machine_map(["build-01=QA", "web-01=Prod"])
    {'build-01': 'QA', 'web-01': 'Prod'}
    """

    mapping: dict[str, str] = {}
    for value in values:
        host, sep, tag = value.partition("=")
        if not sep or not host.strip() or not tag.strip():
            raise click.BadParameter(f"Expected HOST=TAG, got {value!r}", param_hint="--machine")
        mapping[host.strip()] = tag.strip()
    return mapping


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=_DISTRIBUTION,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
