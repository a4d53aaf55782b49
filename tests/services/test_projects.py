"""Tests for ProjectService."""

from __future__ import annotations

from flavortown.domain.projects import ProjectSort
from flavortown.infrastructure.api import ApiError
from flavortown.services.projects import ProjectService
from tests.conftest import FakeApiClient


def _projects() -> list[dict]:
    return [
        {"id": 1, "title": "Zine", "created_at": "2024-05-01T00:00:00Z"},
        {"id": 2, "title": "Amp", "created_at": "2025-02-01T00:00:00Z", "repo_url": "https://r"},
    ]


class TestListProjects:
    def test_default_is_newest_first(self) -> None:
        result = ProjectService(FakeApiClient(projects=_projects())).list_projects()
        assert result.ok
        assert result.op == "project_list"
        assert [e["id"] for e in result.data["entries"]] == [2, 1]
        assert result.data["count"] == 2
        assert result.data["sort"] == "date"
        assert result.data["page"] == 1

    def test_title_sort(self) -> None:
        result = ProjectService(FakeApiClient(projects=_projects())).list_projects(
            sort=ProjectSort.TITLE
        )
        assert [e["title"] for e in result.data["entries"]] == ["Amp", "Zine"]

    def test_page_and_query_forwarded(self) -> None:
        client = FakeApiClient(projects=_projects())
        result = ProjectService(client).list_projects(page=3, query="amp")
        assert client.calls == [("get_projects", {"page": 3, "query": "amp"})]
        assert result.data["query"] == "amp"
        assert result.data["page"] == 3

    def test_empty_page_is_ok(self) -> None:
        result = ProjectService(FakeApiClient()).list_projects()
        assert result.ok
        assert result.data["entries"] == []

    def test_record_without_title_is_malformed(self) -> None:
        result = ProjectService(FakeApiClient(projects=[{"id": 9}])).list_projects()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_ITEM"
        assert result.error.detail == {"item_id": 9, "field": "title"}

    def test_api_failure(self) -> None:
        class Broken(FakeApiClient):
            def get_projects(self, page: int = 1, query: str | None = None) -> list[dict]:
                raise ApiError("HTTP 503: down", status_code=503)

        result = ProjectService(Broken()).list_projects()
        assert result.error is not None
        assert result.error.code == "API_ERROR"


class TestGetProject:
    def test_found(self) -> None:
        result = ProjectService(FakeApiClient(projects=_projects())).get_project("2")
        assert result.ok
        assert result.op == "project_get"
        assert result.data["title"] == "Amp"
        assert result.data["repo_url"] == "https://r"

    def test_missing_is_not_found(self) -> None:
        result = ProjectService(FakeApiClient(projects=_projects())).get_project(99)
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
