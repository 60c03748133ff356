"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``dicectl <command> --examples`` prints the
command's usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` option when *examples* text is supplied."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class DiceCommand(_ExamplesMixin, click.Command):
    """Click Command that accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DiceGroup(_ExamplesMixin, click.Group):
    """Click Group that accepts ``examples=``; subcommands default to DiceCommand."""

    command_class = DiceCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
