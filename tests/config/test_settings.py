"""Tests for FlavortownSettings — layered settings with TOML source."""

import json
from pathlib import Path

import click
import pytest

from flavortown.config.settings import FlavortownSettings
from flavortown.domain.selection import SortMode
from flavortown.config.models import DEFAULT_BASE_URL


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = FlavortownSettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.api_key is None
        assert settings.json_output is False
        assert settings.api.base_url == DEFAULT_BASE_URL
        assert settings.api.timeout == 30.0
        assert settings.store.sort is SortMode.COST_ASC
        assert settings.store.group is True
        assert settings.credentials_path == tmp_path / "credentials.json"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FlavortownSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = FlavortownSettings.from_cli(cwd=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "flavortown.toml").write_text(
            '[store]\nsort = "name"\ngroup = false\n[api]\ntimeout = 5\n'
        )
        settings = FlavortownSettings.from_cli(cwd=tmp_path)
        assert settings.store.sort is SortMode.NAME
        assert settings.store.group is False
        assert settings.api.timeout == 5
        assert settings.api.base_url == DEFAULT_BASE_URL
        assert settings.config_path == (tmp_path / "flavortown.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text('[api]\nbase_url = "https://staging.test/api/v1"\n')
        settings = FlavortownSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.api.base_url == "https://staging.test/api/v1"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "flavortown.toml").write_text("[store\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FlavortownSettings.from_cli(cwd=tmp_path)

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "flavortown.toml").write_text('[store]\nsort = "name"\n')
        monkeypatch.setenv("FLAVORTOWN_STORE__SORT", "price-desc")
        settings = FlavortownSettings.from_cli(cwd=tmp_path)
        assert settings.store.sort is SortMode.COST_DESC


class TestApiKey:
    def test_from_credentials_file(self, tmp_path: Path, logged_in: str) -> None:
        settings = FlavortownSettings.from_cli(cwd=tmp_path)
        assert settings.api_key == logged_in

    def test_env_beats_credentials(
        self, tmp_path: Path, logged_in: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLAVORTOWN_API_KEY", "from-env")
        settings = FlavortownSettings.from_cli(cwd=tmp_path)
        assert settings.api_key == "from-env"

    def test_cleared_key(self, tmp_path: Path, credentials_path: Path) -> None:
        credentials_path.write_text(json.dumps({"apiKey": None}))
        assert FlavortownSettings.from_cli(cwd=tmp_path).api_key is None
