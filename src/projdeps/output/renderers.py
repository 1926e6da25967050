"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; ops that only
carry pre-rendered ``lines`` share :func:`_render_lines`.

Identifiers are always wrapped in :class:`~rich.text.Text`, so names
containing square brackets are never read as console markup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.text import Text

from projdeps.output.console import create_console, get_output
from projdeps.services.result import CONFIG_ERROR

if TYPE_CHECKING:
    from rich.console import Console

    from projdeps.services.result import ServiceResult

INDENT = "  "
PATH_SEPARATOR = " -> "

# Diagnostic form shared by configuration errors and aborted scans.
UNHANDLED_PREFIX = "Unhandled error: "


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to text; empty when there is nothing to show."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_lines)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_lines(result: ServiceResult, console: Console) -> None:
    for line in result.data.get("lines", []):
        console.print(Text(line))


def _render_closure(result: ServiceResult, console: Console) -> None:
    console.print(Text("Projects:", style="deps.heading"))
    for name in result.data.get("projects", []):
        console.print(Text(INDENT + name))
    console.print(Text("NuGet Packages:", style="deps.heading"))
    for name in result.data.get("packages", []):
        console.print(Text(INDENT + name, style="deps.package"))


def _render_paths(result: ServiceResult, console: Console) -> None:
    paths: list[list[str]] = result.data.get("paths", [])
    if not paths:
        source = result.data.get("source", "")
        target = result.data.get("target", "")
        console.print(Text(f"No path from '{source}' to '{target}' found."))
        return

    arrow = Text(PATH_SEPARATOR, style="deps.arrow")
    for path in paths:
        console.print(arrow.join(Text(name) for name in path))


def _render_error(result: ServiceResult, console: Console) -> None:
    if result.error is None:
        msg = f"{result.op} failed"
    elif result.error.code == CONFIG_ERROR:
        msg = UNHANDLED_PREFIX + result.error.message
    else:
        msg = result.error.message
    console.print(Text(msg, style="deps.error"))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "tree": _render_lines,
    "entry": _render_lines,
    "depends_on": _render_lines,
    "entry_simple": _render_closure,
    "path": _render_paths,
}
