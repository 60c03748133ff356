"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Wires the roll pipeline from settings and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dicectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dicectl.config.settings import DiceSettings
    from dicectl.domain.history import RollHistory
    from dicectl.services.result import ServiceResult
    from dicectl.services.roll import RollService

# Non-zero exit status per error code; anything else exits 1.
EXIT_CODES: dict[str, int] = {
    "PARSE_ERROR": 2,
    "VALIDATION_ERROR": 3,
}


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  One RollHistory lives
    for the whole invocation so every roll a command makes is recorded.
    """

    def __init__(self, settings: DiceSettings, *, command: str | None = None) -> None:
        from dicectl.config.logging import bind_invocation, configure_logging
        from dicectl.domain.history import RollHistory

        self.settings = settings
        self.history: RollHistory = RollHistory()

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_invocation(command=command, seed=settings.roll.seed)

    def roll_service(self, renderer_name: str | None = None) -> RollService:
        """Build a RollService wired with the configured source and renderer."""
        from dicectl.domain.evaluator import RollEvaluator, SeededRandomSource
        from dicectl.output.dice import get_renderer
        from dicectl.services.roll import RollService

        roll_cfg = self.settings.roll
        return RollService(
            RollEvaluator(SeededRandomSource(roll_cfg.seed)),
            get_renderer(renderer_name or roll_cfg.renderer),
            history=self.history,
            limits=roll_cfg.limits(),
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with the code from EXIT_CODES.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            code = result.error.code if result.error else ""
            raise SystemExit(EXIT_CODES.get(code, 1))
