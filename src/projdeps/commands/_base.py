"""Custom Click base classes and shared query options.

``DepsCommand`` accepts an ``examples`` parameter (printed by
``--examples``) and tolerates unknown options, which are reported as
warnings instead of aborting the command.

``DepsGroup`` is the root group. It turns the failure modes Click would
normally treat as usage errors into plain diagnostics on stderr:

* unknown command, including an unknown leading option:
  ``Unknown command: <name>`` followed by the usage text,
* option given without a value: ``Unhandled error: Missing value for <option>``,
* any other exception from scanning or parsing: ``Unhandled error: <msg>``.

None of these change the exit status.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from projdeps.output.renderers import UNHANDLED_PREFIX

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DepsCommand(click.Command):
    """Click Command with ``--examples`` support and lenient option parsing."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = {
            "ignore_unknown_options": True,
            "allow_extra_args": True,
            **(kwargs.pop("context_settings", None) or {}),
        }
        super().__init__(*args, context_settings=context_settings, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class DepsGroup(click.Group):
    """Root group: case-insensitive dispatch and non-fatal error reporting."""

    command_class = DepsCommand

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            if not args:
                raise
            click.echo(f"Unknown command: {args[0].lower()}", err=True)
            click.echo(ctx.get_help())
            ctx.exit(0)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.BadOptionUsage as exc:
            message = exc.message
            if "requires" in message:
                message = f"Missing value for {exc.option_name}"
            click.echo(f"{UNHANDLED_PREFIX}{message}", err=True)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as exc:
            logger.debug("Unhandled error", exc_info=True)
            click.echo(f"{UNHANDLED_PREFIX}{exc}", err=True)
        return None


def query_options(func: F) -> F:
    """Add ``--path``, ``--source`` and ``--target`` to a query command.

    Every command accepts all three; each one only requires the options it
    uses. Values are validated by the command, not by Click, so a missing
    option is reported without a usage error.
    """
    func = click.option(
        "--target", default=None, metavar="NAME", help="Target project or package."
    )(func)
    func = click.option("--source", default=None, metavar="NAME", help="Source project.")(func)
    func = click.option(
        "--path",
        "root",
        default=None,
        metavar="FOLDER",
        help="Folder scanned recursively for project files.",
    )(func)
    return func


def required_message(command: str, **options: str | None) -> str | None:
    """Describe the required options of *command* if any of them is missing.

    >>> required_message("path", source="A", target=None)
    "Error: --source and --target are required for 'path'."
    """
    if all(options.values()):
        return None
    names = " and ".join(f"--{name}" for name in options)
    verb = "is" if len(options) == 1 else "are"
    return f"Error: {names} {verb} required for '{command}'."
