"""RollService — parse, evaluate, record, and render dice notation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from dicectl.domain.errors import DiceError
from dicectl.domain.history import RollHistory
from dicectl.domain.notation import RollLimits, parse_notation
from dicectl.services.base import BaseService
from dicectl.services.result import ServiceResult

if TYPE_CHECKING:
    from dicectl.domain.evaluator import RollEvaluator, RollResult
    from dicectl.output.dice import Renderer


class RollService(BaseService):
    """Runs the notation → specification → result → display pipeline.

    Args:
        evaluator: Executes specifications against its RandomSource.
        renderer: Formats each RollResult into a display string.
        history: Session history; a fresh one is created when omitted.
        limits: Optional parse-time upper bounds on count and sides.
    """

    def __init__(
        self,
        evaluator: RollEvaluator,
        renderer: Renderer,
        *,
        history: RollHistory | None = None,
        limits: RollLimits | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._renderer = renderer
        self._history = history if history is not None else RollHistory()
        self._limits = limits

    @property
    def history(self) -> RollHistory:
        return self._history

    def parse(self, notation: str) -> ServiceResult:
        """Validate *notation* without rolling."""
        try:
            spec = parse_notation(notation, limits=self._limits)
        except DiceError as exc:
            return self._failure("parse", exc)
        return ServiceResult(
            ok=True,
            op="parse",
            data={
                "notation": spec.notation,
                "count": spec.count,
                "sides": spec.sides,
                "modifier": spec.modifier,
            },
        )

    def roll(self, notation: str) -> ServiceResult:
        """Roll *notation* once, append it to history, and render it."""
        try:
            result = self._roll_one(notation)
        except DiceError as exc:
            return self._failure("roll", exc)
        return ServiceResult(ok=True, op="roll", data=self._payload(result))

    def roll_many(self, notations: Sequence[str], *, times: int = 1) -> ServiceResult:
        """Roll each notation *times* times, in order, and summarize the session.

        Stops at the first invalid notation. Rolls made before it remain in
        history but are not reported.
        """
        rolls: list[dict[str, object]] = []
        for notation in notations:
            for _ in range(times):
                try:
                    result = self._roll_one(notation)
                except DiceError as exc:
                    return self._failure("roll_many", exc)
                rolls.append(self._payload(result))
        return ServiceResult(
            ok=True,
            op="roll_many",
            data={"rolls": rolls, "summary": self._history.summary()},
        )

    # ── Internals ─────────────────────────────────────────────────────

    def _roll_one(self, notation: str) -> RollResult:
        spec = parse_notation(notation, limits=self._limits)
        result = self._evaluator.evaluate(spec)
        self._history.append(result)
        return result

    def _payload(self, result: RollResult) -> dict[str, object]:
        return {**result.to_dict(), "rendered": self._renderer.render(result)}
