"""Config file discovery.

Looks for flavortown.toml walking up from the working directory (so a
project can pin its own defaults), then falls back to the per-user file
under ``~/.config/flavortown/``. FLAVORTOWN_CONFIG and --config override
both.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "flavortown.toml"
CONFIG_ENV_VAR = "FLAVORTOWN_CONFIG"


def user_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "flavortown" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the first flavortown.toml found, or None.

    Order: FLAVORTOWN_CONFIG, walk-up from *start* (default: cwd),
    then the user config file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    fallback = user_config_path()
    return fallback if fallback.is_file() else None
