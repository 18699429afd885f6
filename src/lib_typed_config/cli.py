"""CLI adapter for ``lib_typed_config`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators check what a set of configuration files resolves to, and how
INI keys are renamed, without writing Python.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_normalize_key` – prints the canonical field name of INI keys.
* :func:`cli_load` – loads files into a container and prints it as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It only talks to :class:`lib_typed_config.core.Config` and
the key normaliser; library errors surface through ``lib_cli_exit_tools`` so
every command reports failures and exit codes the same way.
"""

from __future__ import annotations

import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import Config
from .domain.keys import normalize_key

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("lib_typed_config")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Typed configuration container inspector",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_typed_config",
    message="lib_typed_config version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command storing the traceback preference for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_typed_config")
    except metadata.PackageNotFoundError:
        click.echo("lib_typed_config (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_typed_config')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("normalize-key", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("keys", nargs=-1, required=True)
def cli_normalize_key(keys: Sequence[str]) -> None:
    """Print the canonical field name for each INI *key*, one per line.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["normalize-key", "db.connection_pool"])
    >>> result.output.strip()
    'dbConnectionPool'
    """

    for key in keys:
        click.echo(normalize_key(key))


@cli.command("load", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "--overwrite/--no-overwrite",
    default=False,
    show_default=True,
    help="Let later files replace fields set by earlier ones",
)
@click.option("--slice", "prefix", default=None, help="Only print fields under this prefix, renamed")
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
def cli_load(files: Sequence[Path], overwrite: bool, prefix: Optional[str], indent: Optional[int]) -> None:
    """Load *files* in order into one container and print its fields as JSON.

    The format of every file follows its extension. Without ``--overwrite``
    the first file that sets a field wins.
    """

    config = Config()
    for path in files:
        config.load_from_file(path, overwrite=overwrite)
    if prefix is not None:
        config = config.get_slice(prefix)
    click.echo(config.to_json(indent=indent))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_typed_config",
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
