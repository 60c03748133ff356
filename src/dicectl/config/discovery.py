"""Locate ``dicectl.toml``.

Lookup order: the ``DICECTL_CONFIG`` env var, then a walk up from the
starting directory towards the filesystem root (the way git finds ``.git``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dicectl.toml"
CONFIG_ENV_VAR = "DICECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``dicectl.toml`` at or above *start* (default: cwd).

    When ``DICECTL_CONFIG`` is set it is authoritative: its file is returned
    if it exists, and no walk-up happens otherwise.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
