"""Shared pytest fixtures and test helpers for dicectl tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from dicectl.domain.evaluator import RollEvaluator, SequenceRandomSource
from dicectl.output.dice import Renderer, TextRenderer
from dicectl.services.roll import RollService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray dicectl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv("DICECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def sequence_service(
    values: Iterable[int], renderer: Renderer | None = None, **kwargs: object
) -> RollService:
    """Build a RollService whose dice replay *values* in order."""
    evaluator = RollEvaluator(SequenceRandomSource(values))
    return RollService(evaluator, renderer or TextRenderer(), **kwargs)  # type: ignore[arg-type]
