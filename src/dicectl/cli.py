"""Root CLI group for dicectl with global flags and command registration."""

from __future__ import annotations

import click

from dicectl import __version__
from dicectl.commands import register_commands
from dicectl.commands._base import DiceGroup
from dicectl.commands._context import AppContext
from dicectl.config.settings import DiceSettings


_CLI_EXAMPLES = """\
  dicectl roll 2d6
  dicectl --seed 7 roll d20+5 --renderer ascii
  dicectl --json parse 4d8-1
  dicectl -q roll 4d6 --times 6"""


@click.group(cls=DiceGroup, examples=_CLI_EXAMPLES, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dicectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--seed", type=int, default=None, help="Seed the random source for repeatable rolls."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    seed: int | None,
) -> None:
    """dicectl — roll dice from standard notation."""
    ctx.ensure_object(dict)
    settings = DiceSettings.from_cli(
        config_path=config_path,
        seed=seed,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
