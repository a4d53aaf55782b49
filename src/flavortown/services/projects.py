"""ProjectService — browse Flavortown projects one API page at a time."""

from __future__ import annotations

import logging

from flavortown.domain.items import MalformedItemError
from flavortown.domain.projects import Project, ProjectSort, order_projects, project_to_dict
from flavortown.infrastructure.api import ApiError
from flavortown.services.base import BaseService
from flavortown.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ProjectService(BaseService):
    """Handles project listing and single-project lookup."""

    def list_projects(
        self,
        page: int = 1,
        query: str | None = None,
        sort: ProjectSort = ProjectSort.DATE,
    ) -> ServiceResult:
        """Fetch one page of projects, optionally searched, and order it."""
        op = "project_list"
        try:
            records = self._client.get_projects(page=page, query=query)
        except ApiError as exc:
            return self._api_failure(op, exc)

        try:
            projects = [Project.from_record(rec) for rec in records]
        except MalformedItemError as exc:
            return self._malformed(op, exc)

        ordered = order_projects(projects, sort)
        logger.debug("project_list: page %d returned %d projects", page, len(ordered))
        data = {
            "count": len(ordered),
            "page": page,
            "query": query,
            "sort": str(sort),
            "entries": [project_to_dict(project) for project in ordered],
        }
        return ServiceResult(ok=True, op=op, data=data)

    def get_project(self, project_id: str | int) -> ServiceResult:
        op = "project_get"
        try:
            record = self._client.get_project(project_id)
        except ApiError as exc:
            return self._api_failure(op, exc)

        try:
            project = Project.from_record(record)
        except MalformedItemError as exc:
            return self._malformed(op, exc)
        return ServiceResult(ok=True, op=op, data=project_to_dict(project))
