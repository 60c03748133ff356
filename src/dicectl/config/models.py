"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dicectl.toml only contains
overrides.  An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from dicectl.domain.notation import DEFAULT_MAX_COUNT, DEFAULT_MAX_SIDES, RollLimits


class RollConfig(BaseModel):
    """[roll] section."""

    model_config = {"frozen": True}

    renderer: Literal["text", "ascii"] = "text"
    seed: int | None = None
    max_count: int = Field(default=DEFAULT_MAX_COUNT, ge=1)
    max_sides: int = Field(default=DEFAULT_MAX_SIDES, ge=2)

    def limits(self) -> RollLimits:
        return RollLimits(max_count=self.max_count, max_sides=self.max_sides)
