"""Roll renderers: convert a RollResult into a display string.

Any object with a ``render(result) -> str`` method satisfies
:class:`Renderer`; the service layer never inspects which one it holds.
Rendering is a pure function of the RollResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dicectl.domain.evaluator import RollResult


class Renderer(Protocol):
    """Display capability shared by all renderers."""

    def render(self, result: RollResult) -> str: ...


class UnknownRendererError(KeyError):
    """Raised by :func:`get_renderer` for an unregistered name."""


def _signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


class TextRenderer:
    """One-line summary: ``You rolled 7 (3, 4)``."""

    def render(self, result: RollResult) -> str:
        outcomes = ", ".join(str(o) for o in result.outcomes)
        line = f"You rolled {result.total} ({outcomes})"
        if result.modifier:
            line += f" {_signed(result.modifier)}"
        return line


# Pip positions on a 3x3 grid, keyed by face value.
_PIPS: dict[int, frozenset[tuple[int, int]]] = {
    1: frozenset({(1, 1)}),
    2: frozenset({(0, 0), (2, 2)}),
    3: frozenset({(0, 0), (1, 1), (2, 2)}),
    4: frozenset({(0, 0), (0, 2), (2, 0), (2, 2)}),
    5: frozenset({(0, 0), (0, 2), (1, 1), (2, 0), (2, 2)}),
    6: frozenset({(0, 0), (0, 2), (1, 0), (1, 2), (2, 0), (2, 2)}),
}

_INNER_WIDTH = 7


class AsciiRenderer:
    """Boxed die faces laid side by side, followed by a total line.

    Dice with six or fewer sides show pips; larger dice show the number.
    At most *per_row* faces share a row.
    """

    def __init__(self, *, pip: str = "o", per_row: int = 6) -> None:
        if per_row < 1:
            raise ValueError("per_row must be at least 1")
        self.pip = pip
        self.per_row = per_row

    def face(self, value: int, sides: int) -> list[str]:
        """Return the five lines of a single die face."""
        if sides <= len(_PIPS) and value in _PIPS:
            pips = _PIPS[value]
            rows = [
                " " + " ".join(self.pip if (r, c) in pips else " " for c in range(3)) + " "
                for r in range(3)
            ]
        else:
            # Faces grow to fit values wider than the default box.
            width = max(_INNER_WIDTH, len(str(value)) + 2)
            blank = " " * width
            rows = [blank, f"{value:^{width}}", blank]
        edge = "+" + "-" * len(rows[0]) + "+"
        return [edge, *(f"|{row}|" for row in rows), edge]

    def render(self, result: RollResult) -> str:
        sides = result.specification.sides
        faces = [self.face(value, sides) for value in result.outcomes]
        lines: list[str] = []
        for start in range(0, len(faces), self.per_row):
            chunk = faces[start : start + self.per_row]
            lines.extend(" ".join(parts) for parts in zip(*chunk, strict=True))
        total = f"Total: {result.total}"
        if result.modifier:
            total += f" ({result.subtotal} {_signed(result.modifier)})"
        lines.append(total)
        return "\n".join(lines)


RENDERERS: dict[str, type[TextRenderer] | type[AsciiRenderer]] = {
    "text": TextRenderer,
    "ascii": AsciiRenderer,
}


def get_renderer(name: str) -> Renderer:
    """Instantiate the renderer registered under *name*."""
    try:
        cls = RENDERERS[name]
    except KeyError:
        known = ", ".join(sorted(RENDERERS))
        raise UnknownRendererError(f"Unknown renderer {name!r} (known: {known})") from None
    return cls()
