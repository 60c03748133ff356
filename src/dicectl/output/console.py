"""Rich Console factory and theme for dicectl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DICE_THEME = Theme(
    {
        "dice.ok": "bold green",
        "dice.error": "bold red",
        "dice.op": "bold cyan",
        "dice.key": "dim",
        "dice.notation": "bold blue",
        "dice.total": "bold magenta",
        "dice.max": "bold green",
        "dice.min": "bold red",
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
        theme=DICE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_outcome(value: int, sides: int) -> str:
    """Highlight natural maximums and ones."""
    if value == sides:
        return "dice.max"
    if value == 1:
        return "dice.min"
    return ""
