"""Subcommand modules for projdeps.

Provides register_commands() which attaches the five query commands to
the root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the query commands on the root CLI group."""
    from projdeps.commands.closure import entry_simple
    from projdeps.commands.depends_on import depends_on
    from projdeps.commands.path import path
    from projdeps.commands.tree import entry, tree

    cli.add_command(tree)
    cli.add_command(entry)
    cli.add_command(entry_simple)
    cli.add_command(depends_on)
    cli.add_command(path)
