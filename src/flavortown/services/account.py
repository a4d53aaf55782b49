"""Account operations — store, show, and clear the API key.

These touch only the local credentials file, never the network.
"""

from __future__ import annotations

from pathlib import Path

from flavortown.config.credentials import mask_api_key, save_credentials
from flavortown.services.result import ServiceResult


def save_api_key(path: Path, key: str) -> ServiceResult:
    """Persist *key*; an empty key cancels setup."""
    key = key.strip()
    if not key:
        return ServiceResult.failure("setup", "EMPTY_KEY", "No key entered. Setup cancelled.")
    save_credentials(path, apiKey=key)
    return ServiceResult(
        ok=True,
        op="setup",
        data={"masked_key": mask_api_key(key), "path": str(path)},
    )


def describe_api_key(key: str | None) -> ServiceResult:
    if not key:
        return ServiceResult(ok=True, op="whoami", data={"logged_in": False})
    return ServiceResult(
        ok=True,
        op="whoami",
        data={"logged_in": True, "masked_key": mask_api_key(key)},
    )


def clear_api_key(path: Path) -> ServiceResult:
    save_credentials(path, apiKey=None)
    return ServiceResult(ok=True, op="logout", data={"path": str(path)})
