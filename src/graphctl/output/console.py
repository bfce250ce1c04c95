"""Rich Console factory and theme for graphctl output.

Consoles render into a StringIO buffer so renderers keep the
``format_result() -> str`` contract. Rich drops color codes when no
terminal is attached (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPH_THEME = Theme(
    {
        "graph.ok": "bold green",
        "graph.error": "bold red",
        "graph.warning": "bold yellow",
        "graph.op": "bold cyan",
        "graph.key": "dim",
        "graph.node": "bold blue",
        "graph.label": "bold",
        "graph.weight": "magenta",
        "graph.directed": "yellow",
        "graph.path": "dim",
    }
)

# Cycled by the coloring renderer; index = color number.
COLOR_SWATCHES: tuple[str, ...] = (
    "red",
    "green",
    "blue",
    "yellow",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_blue",
    "bright_magenta",
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=GRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def swatch_for_color(color: int) -> str:
    return COLOR_SWATCHES[color % len(COLOR_SWATCHES)]
