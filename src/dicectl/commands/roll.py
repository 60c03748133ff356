"""Command: roll one or more dice notations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dicectl.commands._base import DiceCommand
from dicectl.output.dice import RENDERERS

if TYPE_CHECKING:
    from dicectl.commands._context import AppContext


@click.command(
    cls=DiceCommand,
    examples="""\
  dicectl roll 2d6
  dicectl roll d20+5 --renderer ascii
  dicectl roll 4d6 --times 6
  dicectl roll 1d20 1d8+3
  dicectl --seed 42 --json roll 3d10-2""",
)
@click.argument("notations", nargs=-1, required=True, metavar="NOTATION...")
@click.option(
    "-r",
    "--renderer",
    type=click.Choice(sorted(RENDERERS)),
    default=None,
    help="Display style (default from [roll] renderer).",
)
@click.option(
    "-n",
    "--times",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Roll each notation this many times.",
)
@click.pass_obj
def roll(app: AppContext, notations: tuple[str, ...], renderer: str | None, times: int) -> None:
    """Roll dice described by NOTATION (e.g. 2d6, d20+5, 4d8-1)."""
    renderer_name = renderer or app.settings.roll.renderer
    svc = app.roll_service(renderer_name)
    if len(notations) == 1 and times == 1:
        result = svc.roll(notations[0])
    else:
        result = svc.roll_many(notations, times=times)
    meta = {"renderer": renderer_name, "seed": app.settings.roll.seed}
    app.emit(result.model_copy(update={"meta": meta}))
