"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Validates the scan root, hands out services, and
centralizes result emission (stdout/stderr routing).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import click

from projdeps.errors import ConfigurationError
from projdeps.output.renderers import render_result
from projdeps.services.result import CONFIG_ERROR, MISSING_OPTION, ServiceResult

if TYPE_CHECKING:
    from projdeps.config.settings import ProjdepsSettings
    from projdeps.infrastructure.graph.engine import GraphEngine
    from projdeps.services.graph import GraphService

INVALID_PATH_MESSAGE = (
    "Invalid or missing path. Use --path <folder> to specify the solution directory."
)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. Nothing is scanned
    until a command has validated its options, so ``--help`` and usage
    errors never touch the file system.
    """

    def __init__(self, settings: ProjdepsSettings) -> None:
        self.settings = settings

        from projdeps.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def engine(self, root: str | None) -> GraphEngine:
        """Return a graph engine for the folder *root*.

        Raises:
            ConfigurationError: If *root* is missing or not a directory.
        """
        if not root or not Path(root).is_dir():
            raise ConfigurationError(INVALID_PATH_MESSAGE)

        from projdeps.infrastructure.graph.engine import GraphEngine

        return GraphEngine(Path(root), self.settings.scan)

    def run(
        self,
        op: str,
        root: str | None,
        query: Callable[[GraphService], ServiceResult],
        *,
        missing: str | None = None,
        extra_args: Sequence[str] = (),
    ) -> None:
        """Validate options, run *query* against the graph under *root*, and emit.

        The scan root is checked first, then *missing* (the message from
        :func:`~projdeps.commands._base.required_message`). Unknown options
        in *extra_args* become warnings on whichever result is emitted.
        """
        warnings = [f"Unknown option {arg}" for arg in extra_args]

        try:
            engine = self.engine(root)
        except ConfigurationError as exc:
            self.emit(ServiceResult.failure(op, CONFIG_ERROR, str(exc)), warnings=warnings)
            return

        if missing:
            self.emit(ServiceResult.failure(op, MISSING_OPTION, missing), warnings=warnings)
            return

        from projdeps.services.graph import GraphService

        self.emit(query(GraphService(engine)), warnings=warnings)

    def emit(self, result: ServiceResult, *, warnings: Sequence[str] = ()) -> None:
        """Write a ServiceResult to the right stream.

        * Warnings always go to stderr, ahead of anything else.
        * Success (``result.ok``): rendered lines to stdout.
        * Failure: the error message to stderr.

        The exit status is the same either way.
        """
        for warning in (*warnings, *result.warnings):
            click.echo(warning, err=True)

        output = render_result(result)
        if output:
            click.echo(output, err=not result.ok)
