"""Rich Console factory and theme for workq output.

Consoles render into a StringIO buffer so renderers can return strings.
Rich drops color codes by itself when there is no terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WORKQ_THEME = Theme(
    {
        "workq.ok": "bold green",
        "workq.error": "bold red",
        "workq.op": "bold cyan",
        "workq.key": "dim",
        "workq.count": "bold magenta",
        "workq.result": "green",
        "workq.plain": "",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=WORKQ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_classification(result_producing: bool) -> str:
    """Style for a task kind, by whether it produces a result."""
    return "workq.result" if result_producing else "workq.plain"
