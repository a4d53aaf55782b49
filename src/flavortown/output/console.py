"""Rich Console factory and theme for flavortown output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FT_THEME = Theme(
    {
        "ft.ok": "bold green",
        "ft.error": "bold red",
        "ft.warning": "bold yellow",
        "ft.op": "bold cyan",
        "ft.key": "dim",
        "ft.id": "green",
        "ft.name": "bold",
        "ft.type": "blue",
        "ft.description": "italic",
        "ft.cost": "yellow",
        "ft.stock.unlimited": "dim",
        "ft.stock.out_of_stock": "red",
        "ft.stock.available": "default",
        "ft.limited": "red",
        "ft.attachments": "dim",
        "ft.url": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_stock(state: str) -> str:
    """Return the Rich style name for a stock state."""
    return f"ft.stock.{state}"
