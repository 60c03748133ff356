"""Roll evaluation against an injected randomness source.

The evaluator never reaches for module-level ``random``: every source of
randomness is passed in at construction time so tests can substitute a
deterministic :class:`SequenceRandomSource`.

INVARIANT: ``evaluate`` calls ``source.roll`` exactly ``count`` times, in
order, and preserves that order in ``RollResult.outcomes``.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import structlog

from dicectl.domain.notation import RollSpecification

logger = structlog.get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Produces a uniform integer in ``[1, sides]`` on demand."""

    def roll(self, sides: int) -> int: ...


class SeededRandomSource:
    """RandomSource backed by a private :class:`random.Random` instance."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def roll(self, sides: int) -> int:
        return self._rng.randint(1, sides)


class SequenceRandomSource:
    """RandomSource that replays a fixed sequence of outcomes.

    Raises ``RuntimeError`` once the sequence is exhausted and ``ValueError``
    if the next value cannot appear on a die with *sides* faces.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def roll(self, sides: int) -> int:
        if self._index >= len(self._values):
            raise RuntimeError("SequenceRandomSource exhausted")
        value = self._values[self._index]
        if not 1 <= value <= sides:
            raise ValueError(f"Sequence value {value} is not a face of a d{sides}")
        self._index += 1
        return value


@dataclass(frozen=True)
class RollResult:
    """Outcome of evaluating a RollSpecification."""

    specification: RollSpecification
    outcomes: tuple[int, ...]
    total: int

    @property
    def subtotal(self) -> int:
        """Sum of the dice without the modifier."""
        return sum(self.outcomes)

    @property
    def modifier(self) -> int:
        return self.specification.modifier

    def to_dict(self) -> dict[str, Any]:
        spec = self.specification
        return {
            "notation": spec.notation,
            "count": spec.count,
            "sides": spec.sides,
            "modifier": spec.modifier,
            "outcomes": list(self.outcomes),
            "total": self.total,
        }


class RollEvaluator:
    """Executes roll specifications against a RandomSource."""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    @property
    def source(self) -> RandomSource:
        return self._source

    def evaluate(self, spec: RollSpecification) -> RollResult:
        logger.debug("dice.roll.start", notation=spec.notation)
        outcomes = tuple(self._source.roll(spec.sides) for _ in range(spec.count))
        result = RollResult(
            specification=spec,
            outcomes=outcomes,
            total=sum(outcomes) + spec.modifier,
        )
        logger.debug(
            "dice.roll.result", notation=spec.notation, outcomes=outcomes, total=result.total
        )
        return result
