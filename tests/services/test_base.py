"""Tests for BaseService and its API error mapping."""

from flavortown.domain.items import MalformedItemError
from flavortown.infrastructure.api import ApiError
from flavortown.services.base import BaseService
from tests.conftest import FakeApiClient


class TestBaseService:
    def test_client_stored(self) -> None:
        client = FakeApiClient()
        assert BaseService(client)._client is client  # type: ignore[arg-type]

    def test_404_is_not_found(self) -> None:
        result = BaseService._api_failure("store_get", ApiError("HTTP 404: x", status_code=404))
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {"status_code": 404}

    def test_other_status_is_api_error(self) -> None:
        result = BaseService._api_failure("store_list", ApiError("HTTP 502", status_code=502))
        assert result.error is not None
        assert result.error.code == "API_ERROR"

    def test_transport_error_has_no_status(self) -> None:
        result = BaseService._api_failure("store_list", ApiError("Connection refused"))
        assert result.error is not None
        assert result.error.code == "API_ERROR"
        assert result.error.detail == {}
        assert result.error.message == "Connection refused"

    def test_malformed_record(self) -> None:
        exc = MalformedItemError(7, "title", kind="Project")
        result = BaseService._malformed("project_get", exc)
        assert result.error is not None
        assert result.error.code == "MALFORMED_ITEM"
        assert result.error.message == "Project 7: title is missing"
        assert result.error.detail == {"item_id": 7, "field": "title"}
