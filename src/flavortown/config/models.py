"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, flavortown.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from flavortown.domain.selection import SortMode

DEFAULT_BASE_URL = "https://flavortown.hackclub.com/api/v1"

# --- flavortown.toml sections ---


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0


class StoreConfig(BaseModel):
    """[store] section — defaults for ``store list``."""

    model_config = {"frozen": True}

    sort: SortMode = SortMode.COST_ASC
    group: bool = True

