"""Rich Console factory and theme for projdeps output.

Creates Console instances that render to a StringIO buffer, preserving
the ``render_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PROJDEPS_THEME = Theme(
    {
        "deps.error": "bold red",
        "deps.warning": "bold yellow",
        "deps.heading": "bold",
        "deps.package": "cyan",
        "deps.arrow": "dim",
    }
)


def create_console(*, no_color: bool = False) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Soft wrapping keeps every logical line on one physical line no matter
    how deep the tree indentation gets.
    """
    return Console(
        file=StringIO(),
        theme=PROJDEPS_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
