"""Domain exceptions.

Two kinds, both surfaced to the caller unrecovered:

- :class:`ParseError`: the notation does not match the grammar.
- :class:`ValidationError`: the notation is well-formed but out of range.
"""

from __future__ import annotations


class DiceError(ValueError):
    """Base class for invalid dice notation."""

    code = "DICE_ERROR"

    def __init__(self, message: str, *, notation: str) -> None:
        super().__init__(message)
        self.notation = notation


class ParseError(DiceError):
    """Raised when a notation string is syntactically malformed."""

    code = "PARSE_ERROR"


class ValidationError(DiceError):
    """Raised when a well-formed notation violates a range constraint."""

    code = "VALIDATION_ERROR"
