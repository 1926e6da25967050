"""Command: depends-on — trees of projects that reach a target."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projdeps.commands._base import DepsCommand, query_options, required_message

if TYPE_CHECKING:
    from projdeps.commands._context import AppContext


@click.command(
    "depends-on",
    cls=DepsCommand,
    examples="""\
  projdeps depends-on --path ./src --target Newtonsoft.Json
  projdeps depends-on --path ./src --target Core""",
)
@query_options
@click.pass_context
def depends_on(
    ctx: click.Context, root: str | None, source: str | None, target: str | None
) -> None:
    """Print tree of projects depending on a target assembly/NuGet."""
    app: AppContext = ctx.obj
    app.run(
        "depends_on",
        root,
        lambda svc: svc.depends_on(target or ""),
        missing=required_message("depends-on", target=target),
        extra_args=ctx.args,
    )
