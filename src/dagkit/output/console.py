"""Rich Console factory and theme for dagkit output.

Consoles render into a StringIO buffer so renderers can return plain
strings. Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DAG_THEME = Theme(
    {
        "dag.ok": "bold green",
        "dag.error": "bold red",
        "dag.warning": "bold yellow",
        "dag.op": "bold cyan",
        "dag.key": "dim",
        "dag.id": "bold blue",
        "dag.label": "bold",
        "dag.edge": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DAG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
