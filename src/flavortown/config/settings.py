"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FLAVORTOWN_*`` prefix
  3. TOML file    — ``flavortown.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The API key is the exception: when neither a flag nor
``FLAVORTOWN_API_KEY`` supplies one, it is read from the credentials
file written by ``flavortown setup``.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from flavortown.config.credentials import default_credentials_path, read_api_key
from flavortown.config.discovery import find_config
from flavortown.config.models import ApiConfig, StoreConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``flavortown.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FlavortownSettings(BaseSettings):
    """Settings for one CLI invocation, frozen after construction.

    Attributes:
        config_path: TOML file the settings were loaded from, if any.
        credentials_path: JSON file holding the stored API key.
        api_key: Bearer token for the Flavortown API, or None when logged out.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FLAVORTOWN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    credentials_path: Path = Field(default_factory=default_credentials_path)
    api_key: str | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    api: ApiConfig = Field(default_factory=ApiConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> FlavortownSettings:
        """Construct settings from a CLI invocation.

        Discovers ``flavortown.toml`` (or uses explicit *config_path*),
        merges CLI flags as highest-priority overrides, then fills the API
        key from the credentials file if nothing else provided it.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        if settings.api_key is None:
            stored = read_api_key(settings.credentials_path)
            if stored:
                settings = settings.model_copy(update={"api_key": stored})
        return settings
