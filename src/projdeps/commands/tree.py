"""Commands: tree, entry — indented dependency trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projdeps.commands._base import DepsCommand, query_options, required_message

if TYPE_CHECKING:
    from projdeps.commands._context import AppContext


@click.command(
    cls=DepsCommand,
    examples="""\
  projdeps tree --path ./src
  projdeps TREE --PATH ./src""",
)
@query_options
@click.pass_context
def tree(
    ctx: click.Context, root: str | None, source: str | None, target: str | None
) -> None:
    """Print full dependency tree for each project."""
    app: AppContext = ctx.obj
    app.run("tree", root, lambda svc: svc.tree(), extra_args=ctx.args)


@click.command(
    cls=DepsCommand,
    examples="""\
  projdeps entry --path ./src --source Api
  projdeps entry --path ./src --source api""",
)
@query_options
@click.pass_context
def entry(
    ctx: click.Context, root: str | None, source: str | None, target: str | None
) -> None:
    """Print dependency tree for a single project."""
    app: AppContext = ctx.obj
    app.run(
        "entry",
        root,
        lambda svc: svc.entry(source or ""),
        missing=required_message("entry", source=source),
        extra_args=ctx.args,
    )
