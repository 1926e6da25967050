"""Command: entry-simple — flat list of transitive dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projdeps.commands._base import DepsCommand, query_options, required_message

if TYPE_CHECKING:
    from projdeps.commands._context import AppContext


@click.command(
    "entry-simple",
    cls=DepsCommand,
    examples="""\
  projdeps entry-simple --path ./src --source Api""",
)
@query_options
@click.pass_context
def entry_simple(
    ctx: click.Context, root: str | None, source: str | None, target: str | None
) -> None:
    """Print flat list of dependencies (projects then NuGets) for a single project."""
    app: AppContext = ctx.obj
    app.run(
        "entry_simple",
        root,
        lambda svc: svc.entry_simple(source or ""),
        missing=required_message("entry-simple", source=source),
        extra_args=ctx.args,
    )
