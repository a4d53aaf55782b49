"""FlavortownClient — synchronous httpx client for the Flavortown API.

One client per CLI invocation. Sends ``Authorization: Bearer <key>``
when an API key is configured. Every transport failure and non-2xx
response surfaces as :class:`ApiError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# Fallback key when a list endpoint wraps its payload generically.
_DATA_KEY = "data"


class ApiError(Exception):
    """A Flavortown API request failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def unwrap_list(payload: Any, key: str) -> list[Any]:
    """Return the list from a bare payload or one wrapped under *key* or ``data``."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for candidate in (key, _DATA_KEY):
            value = payload.get(candidate)
            if isinstance(value, list):
                return value
    return []


class FlavortownClient:
    """Thin wrapper over ``httpx.Client`` for the store, project and devlog endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers: dict[str, str] = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug("GET %s params=%s", path, params)
        try:
            resp = self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise ApiError("Request timed out") from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"Request failed: {exc}") from exc

        if resp.status_code >= 400:
            detail = resp.text.strip()
            message = f"HTTP {resp.status_code}"
            if detail:
                message += f": {detail[:200]}"
            raise ApiError(message, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError("Response was not valid JSON") from exc

    def _get_object(self, path: str, what: str) -> dict[str, Any]:
        payload = self._get(path)
        if not isinstance(payload, dict):
            raise ApiError(f"Unexpected response shape for {what}")
        return payload

    # --- store ---

    def list_store_items(self) -> list[Any]:
        """Fetch every store item (``GET /store``)."""
        return unwrap_list(self._get("/store"), "items")

    def get_store_item(self, item_id: str | int) -> dict[str, Any]:
        """Fetch one store item (``GET /store/{id}``)."""
        return self._get_object(f"/store/{item_id}", "store item")

    # --- projects ---

    def get_projects(self, page: int = 1, query: str | None = None) -> list[Any]:
        """Fetch one page of projects (``GET /projects``)."""
        params: dict[str, Any] = {"page": page}
        if query:
            params["query"] = query
        return unwrap_list(self._get("/projects", params=params), "projects")

    def get_project(self, project_id: str | int) -> dict[str, Any]:
        """Fetch one project (``GET /projects/{id}``)."""
        return self._get_object(f"/projects/{project_id}", "project")

    # --- devlogs ---

    def get_devlogs(self, project_id: str | int, page: int = 1) -> list[Any]:
        """Fetch one page of a project's devlogs."""
        payload = self._get(f"/projects/{project_id}/devlogs", params={"page": page})
        return unwrap_list(payload, "devlogs")

    def get_devlog(self, project_id: str | int, devlog_id: str | int) -> dict[str, Any]:
        """Fetch one devlog (``GET /projects/{project_id}/devlogs/{id}``)."""
        return self._get_object(f"/projects/{project_id}/devlogs/{devlog_id}", "devlog")
