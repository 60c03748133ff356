"""Dice notation grammar and the immutable roll specification.

Grammar: ``<count>d<sides>[+|-<modifier>]``

- ``count`` is optional and defaults to 1 (``"d20"`` == ``"1d20"``).
- The ``d`` separator is case-insensitive.
- Surrounding whitespace and whitespace around the modifier sign are ignored.

Syntax failures raise :class:`ParseError`; range failures (``count < 1``,
``sides < 2``, or exceeding :class:`RollLimits`) raise :class:`ValidationError`.

INVARIANT: A RollSpecification always satisfies ``count >= 1`` and
``sides >= 2``. Construction enforces it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from dicectl.domain.errors import ParseError, ValidationError

NOTATION_PATTERN = re.compile(
    r"^\s*(?P<count>\d+)?[dD](?P<sides>\d+)\s*(?:(?P<sign>[+-])\s*(?P<modifier>\d+))?\s*$"
)

MIN_COUNT = 1
MIN_SIDES = 2
DEFAULT_MAX_COUNT = 100
DEFAULT_MAX_SIDES = 1000
# Longest digit run accepted for count, sides or modifier.
MAX_DIGITS = 9


@dataclass(frozen=True)
class RollLimits:
    """Upper bounds applied while parsing."""

    max_count: int = DEFAULT_MAX_COUNT
    max_sides: int = DEFAULT_MAX_SIDES


@dataclass(frozen=True)
class RollSpecification:
    """A validated roll request: ``count`` dice of ``sides`` faces plus ``modifier``."""

    count: int
    sides: int
    modifier: int = 0

    def __post_init__(self) -> None:
        _check_range(self.count, self.sides, notation=self.notation)

    @property
    def notation(self) -> str:
        """Canonical notation, e.g. ``"2d6+3"`` or ``"1d20"``."""
        base = f"{self.count}d{self.sides}"
        if self.modifier > 0:
            return f"{base}+{self.modifier}"
        if self.modifier < 0:
            return f"{base}{self.modifier}"
        return base

    def __str__(self) -> str:
        return self.notation


def _check_range(count: int, sides: int, *, notation: str) -> None:
    if count < MIN_COUNT:
        raise ValidationError(
            f"Dice count must be at least {MIN_COUNT}, got {count}", notation=notation
        )
    if sides < MIN_SIDES:
        raise ValidationError(
            f"Dice must have at least {MIN_SIDES} sides, got {sides}", notation=notation
        )


def parse_notation(notation: str, *, limits: RollLimits | None = None) -> RollSpecification:
    """Parse *notation* into a :class:`RollSpecification`.

    Args:
        notation: Dice notation string, e.g. ``"2d6+3"``.
        limits: Optional upper bounds on count and sides.

    Raises:
        ParseError: If *notation* does not match the grammar.
        ValidationError: If the values are out of range.
    """
    match = NOTATION_PATTERN.match(notation)
    if match is None:
        raise ParseError(f"Invalid dice notation: {notation!r}", notation=notation)

    for name in ("count", "sides", "modifier"):
        digits = match.group(name)
        if digits is not None and len(digits) > MAX_DIGITS:
            raise ValidationError(
                f"Dice {name} has more than {MAX_DIGITS} digits", notation=notation
            )

    count = int(match.group("count")) if match.group("count") is not None else 1
    sides = int(match.group("sides"))
    modifier = int(match.group("modifier") or 0)
    if match.group("sign") == "-":
        modifier = -modifier

    _check_range(count, sides, notation=notation)
    if limits is not None:
        if count > limits.max_count:
            raise ValidationError(
                f"Too many dice: {count} (max {limits.max_count})", notation=notation
            )
        if sides > limits.max_sides:
            raise ValidationError(
                f"Too many sides: {sides} (max {limits.max_sides})", notation=notation
            )

    return RollSpecification(count=count, sides=sides, modifier=modifier)
