"""Root CLI group for projdeps with global flags and command registration."""

from __future__ import annotations

import click

from projdeps import __version__
from projdeps.commands import register_commands
from projdeps.commands._base import DepsGroup
from projdeps.commands._context import AppContext
from projdeps.config.settings import ProjdepsSettings

# Command and option names are matched case-insensitively. Unknown leading
# options are left in place and reported as unknown commands.
CONTEXT_SETTINGS = {"token_normalize_func": str.lower, "ignore_unknown_options": True}


@click.group(cls=DepsGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="projdeps")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """projdeps — query project and package dependencies of a source tree.

    Every command scans the folder given with --path for project files.
    """
    settings = ProjdepsSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
