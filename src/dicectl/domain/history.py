"""Append-only roll history scoped to a single session."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dicectl.domain.evaluator import RollResult


class RollHistory:
    """Ordered record of every RollResult produced in a session.

    There is no removal operation: entries are only ever appended.
    """

    def __init__(self) -> None:
        self._results: list[RollResult] = []

    def append(self, result: RollResult) -> None:
        self._results.append(result)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[RollResult]:
        return iter(tuple(self._results))

    def latest(self) -> RollResult | None:
        return self._results[-1] if self._results else None

    def summary(self) -> dict[str, Any]:
        """Aggregate totals across the session.

        Returns ``{"rolls": 0}`` alone when nothing has been rolled yet.
        """
        if not self._results:
            return {"rolls": 0}
        totals = [r.total for r in self._results]
        return {
            "rolls": len(totals),
            "totals": totals,
            "lowest": min(totals),
            "highest": max(totals),
            "mean": round(sum(totals) / len(totals), 2),
        }
