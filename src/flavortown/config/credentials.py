"""API key storage in ``~/.flavortown-cli.json``.

The file is a flat JSON object. Writes merge into whatever is already
there so unrelated keys survive. An unreadable or corrupt file reads as
empty; the next ``setup`` overwrites it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CREDENTIALS_FILENAME = ".flavortown-cli.json"
CREDENTIALS_ENV_VAR = "FLAVORTOWN_CREDENTIALS"


def default_credentials_path() -> Path:
    env_path = os.environ.get(CREDENTIALS_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / CREDENTIALS_FILENAME


def load_credentials(path: Path | None = None) -> dict[str, Any]:
    """Read the credentials file; missing or invalid files yield ``{}``."""
    path = path or default_credentials_path()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable credentials file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring credentials file %s: expected a JSON object", path)
        return {}
    return data


def save_credentials(path: Path | None = None, **updates: Any) -> dict[str, Any]:
    """Merge *updates* into the credentials file and return the new content."""
    path = path or default_credentials_path()
    merged = {**load_credentials(path), **updates}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(merged, indent=2), encoding="utf-8")
    logger.debug("Wrote credentials file %s", path)
    return merged


def read_api_key(path: Path | None = None) -> str | None:
    key = load_credentials(path).get("apiKey")
    return key if isinstance(key, str) and key else None


def mask_api_key(key: str) -> str:
    """Show the first and last four characters of *key*."""
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]
