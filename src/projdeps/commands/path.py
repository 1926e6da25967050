"""Command: path — every dependency path between two nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projdeps.commands._base import DepsCommand, query_options, required_message

if TYPE_CHECKING:
    from projdeps.commands._context import AppContext


@click.command(
    cls=DepsCommand,
    examples="""\
  projdeps path --path ./src --source Api --target Core
  projdeps path --path ./src --source Api --target Serilog""",
)
@query_options
@click.pass_context
def path(
    ctx: click.Context, root: str | None, source: str | None, target: str | None
) -> None:
    """Print paths from source assembly to target assembly."""
    app: AppContext = ctx.obj
    app.run(
        "path",
        root,
        lambda svc: svc.path(source or "", target or ""),
        missing=required_message("path", source=source, target=target),
        extra_args=ctx.args,
    )
