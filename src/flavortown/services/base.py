"""BaseService — shared foundation for flavortown services.

Every service receives a :class:`FlavortownClient` at construction time and
converts client failures into :class:`ServiceResult` errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flavortown.services.result import ServiceResult

if TYPE_CHECKING:
    from flavortown.domain.items import MalformedItemError
    from flavortown.infrastructure.api import ApiError, FlavortownClient

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes that talk to the Flavortown API."""

    def __init__(self, client: FlavortownClient) -> None:
        self._client = client

    @staticmethod
    def _api_failure(op: str, exc: ApiError) -> ServiceResult:
        """Map an ApiError onto an error result."""
        logger.debug("%s failed: %s", op, exc.message)
        code = "NOT_FOUND" if exc.status_code == 404 else "API_ERROR"
        detail = {"status_code": exc.status_code} if exc.status_code is not None else {}
        return ServiceResult.failure(op, code, exc.message, **detail)

    @staticmethod
    def _malformed(op: str, exc: MalformedItemError) -> ServiceResult:
        """Map a record that failed validation onto an error result."""
        return ServiceResult.failure(
            op, "MALFORMED_ITEM", str(exc), item_id=exc.item_id, field=exc.field
        )
