"""Shared pytest fixtures and test helpers for flavortown tests."""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from flavortown.domain.catalog import Catalog
from flavortown.domain.items import Item


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from the real credentials and config files."""
    monkeypatch.setenv("FLAVORTOWN_CREDENTIALS", str(tmp_path / "credentials.json"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in ("FLAVORTOWN_API_KEY", "FLAVORTOWN_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def credentials_path(tmp_path: Path) -> Path:
    return tmp_path / "credentials.json"


@pytest.fixture
def logged_in(credentials_path: Path) -> str:
    """Write an API key to the isolated credentials file."""
    key = "ft_test_key_1234567890"
    credentials_path.write_text(f'{{"apiKey": "{key}"}}', encoding="utf-8")
    return key


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_item(item_id: Hashable, **kwargs: Any) -> Item:
    """Build an Item with sensible defaults for tests."""
    kwargs.setdefault("name", f"Item {item_id}")
    linked = kwargs.pop("linked_ids", ())
    return Item(id=item_id, linked_ids=tuple(linked), **kwargs)


def make_catalog(*items: Item) -> Catalog:
    return Catalog(items)


def record(
    item_id: int,
    name: str | None = None,
    *,
    cost: float | None = None,
    type: str | None = None,
    links: list[int] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a store API record as returned by ``GET /store``."""
    data: dict[str, Any] = {
        "id": item_id,
        "name": name if name is not None else f"Item {item_id}",
        "type": type,
        "stock": extra.pop("stock", None),
        "attached_shop_item_ids": links or [],
    }
    if cost is not None:
        data["ticket_cost"] = {"base_cost": cost}
    data.update(extra)
    return data


def _find(records: list[Any], record_id: str | int) -> Any:
    from flavortown.infrastructure.api import ApiError

    for rec in records:
        if str(rec["id"]) == str(record_id):
            return rec
    raise ApiError("HTTP 404: not found", status_code=404)


class FakeApiClient:
    """In-memory stand-in for FlavortownClient."""

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        *,
        projects: list[dict[str, Any]] | None = None,
        devlogs: dict[str, list[dict[str, Any]]] | None = None,
    ) -> None:
        self.records = records or []
        self.projects = projects or []
        self.devlogs = devlogs or {}
        self.calls: list[tuple[str, Any]] = []
        self.closed = False

    def list_store_items(self) -> list[dict[str, Any]]:
        return list(self.records)

    def get_store_item(self, item_id: str | int) -> dict[str, Any]:
        return _find(self.records, item_id)

    def get_projects(self, page: int = 1, query: str | None = None) -> list[dict[str, Any]]:
        self.calls.append(("get_projects", {"page": page, "query": query}))
        return list(self.projects)

    def get_project(self, project_id: str | int) -> dict[str, Any]:
        return _find(self.projects, project_id)

    def get_devlogs(self, project_id: str | int, page: int = 1) -> list[dict[str, Any]]:
        self.calls.append(("get_devlogs", {"project_id": project_id, "page": page}))
        return list(self.devlogs.get(str(project_id), []))

    def get_devlog(self, project_id: str | int, devlog_id: str | int) -> dict[str, Any]:
        return _find(self.devlogs.get(str(project_id), []), devlog_id)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_api(monkeypatch: pytest.MonkeyPatch) -> FakeApiClient:
    """Route the CLI's API client to an in-memory fake.

    Tests fill ``fake_api.records``, ``.projects`` or ``.devlogs`` before
    invoking the CLI.
    """
    fake = FakeApiClient()
    monkeypatch.setattr(
        "flavortown.commands._context.AppContext.client",
        property(lambda self: fake),
    )
    return fake
