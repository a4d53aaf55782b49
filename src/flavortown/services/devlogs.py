"""DevlogService — read the development logs posted on a project."""

from __future__ import annotations

import logging

from flavortown.domain.items import MalformedItemError
from flavortown.domain.projects import Devlog, devlog_to_dict
from flavortown.infrastructure.api import ApiError
from flavortown.services.base import BaseService
from flavortown.services.result import ServiceResult

logger = logging.getLogger(__name__)


class DevlogService(BaseService):
    """Handles devlog listing and single-devlog lookup."""

    def list_devlogs(self, project_id: str | int, page: int = 1) -> ServiceResult:
        """Fetch one page of a project's devlogs in API order.

        Bodies longer than the preview limit are shortened in the result.
        """
        op = "devlog_list"
        try:
            records = self._client.get_devlogs(project_id, page=page)
        except ApiError as exc:
            return self._api_failure(op, exc)

        try:
            devlogs = [Devlog.from_record(rec) for rec in records]
        except MalformedItemError as exc:
            return self._malformed(op, exc)

        logger.debug("devlog_list: project %s page %d has %d", project_id, page, len(devlogs))
        data = {
            "project_id": project_id,
            "count": len(devlogs),
            "page": page,
            "entries": [devlog_to_dict(devlog, preview=True) for devlog in devlogs],
        }
        return ServiceResult(ok=True, op=op, data=data)

    def get_devlog(self, project_id: str | int, devlog_id: str | int) -> ServiceResult:
        op = "devlog_get"
        try:
            record = self._client.get_devlog(project_id, devlog_id)
        except ApiError as exc:
            return self._api_failure(op, exc)

        try:
            devlog = Devlog.from_record(record)
        except MalformedItemError as exc:
            return self._malformed(op, exc)
        data = {"project_id": project_id, **devlog_to_dict(devlog)}
        return ServiceResult(ok=True, op=op, data=data)
