"""Command: validate dice notation without rolling."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dicectl.commands._base import DiceCommand

if TYPE_CHECKING:
    from dicectl.commands._context import AppContext


@click.command(
    cls=DiceCommand,
    examples="""\
  dicectl parse 2d6
  dicectl parse "1d20 + 3"
  dicectl --json parse 4d8-1""",
)
@click.argument("notation")
@click.pass_obj
def parse(app: AppContext, notation: str) -> None:
    """Parse NOTATION and show its count, sides, and modifier."""
    app.emit(app.roll_service().parse(notation))
