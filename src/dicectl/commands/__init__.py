"""Subcommand modules for dicectl.

Provides register_commands() which uses deferred imports to keep
``dicectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dicectl.commands.parse import parse
    from dicectl.commands.roll import roll

    cli.add_command(roll)
    cli.add_command(parse)
