"""Rich Console factory and theme for oncoreg output.

Consoles render to a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ONCOREG_THEME = Theme(
    {
        "onc.ok": "bold green",
        "onc.error": "bold red",
        "onc.op": "bold cyan",
        "onc.key": "dim",
        "onc.field": "bold blue",
        "onc.code": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ONCOREG_THEME,
        no_color=no_color,
        highlight=False,
        markup=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
