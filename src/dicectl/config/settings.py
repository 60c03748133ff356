"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DICECTL_*`` prefix, ``__`` for nested keys
                    (``DICECTL_ROLL__RENDERER=ascii``)
  3. TOML file    — ``dicectl.toml`` found by :func:`find_config`
  4. Code defaults — baked into :mod:`dicectl.config.models`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from dicectl.config.discovery import find_config
from dicectl.config.models import RollConfig

# The TOML path is resolved per call to from_cli(); pydantic-settings only
# hands the settings class to settings_customise_sources, so it travels here.
_pending = threading.local()


class DiceSettings(BaseSettings):
    """Frozen settings object held by the CLI's AppContext."""

    model_config = {
        "frozen": True,
        "env_prefix": "DICECTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    roll: RollConfig = Field(default_factory=RollConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_path: Path | None = getattr(_pending, "toml_path", None)
        if toml_path is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        seed: int | None = None,
        **cli_flags: Any,
    ) -> DiceSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored (no walk-up).
        ``--seed`` is applied last so it beats ``[roll] seed`` and
        ``DICECTL_ROLL__SEED``.

        Raises:
            click.ClickException: If the TOML file cannot be parsed.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _pending.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _pending.toml_path = None

        if seed is None:
            return settings
        return settings.model_copy(
            update={"roll": settings.roll.model_copy(update={"seed": seed})}
        )
