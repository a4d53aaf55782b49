"""Project and devlog records, ordering, and display rules.

Projects and devlogs are shown as the API returns them, one page at a
time. The only local processing is project ordering and trimming long
devlog bodies in listings.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from flavortown.domain.items import MalformedItemError
from flavortown.domain.selection import name_collation_key

BODY_PREVIEW_LIMIT = 100
UNKNOWN_DATE = "Unknown date"


class ProjectSort(StrEnum):
    """Orderings accepted by ``projects list --sort``."""

    TITLE = "title"
    DATE = "date"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 API timestamp; anything unparseable yields None."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _require_record(record: Any, kind: str) -> Any:
    """Return the record's id, raising MalformedItemError if unusable."""
    if not isinstance(record, Mapping):
        raise MalformedItemError(None, "record", "is not an object", kind=kind)
    record_id = record.get("id")
    if record_id is None:
        raise MalformedItemError(None, "id", kind=kind)
    if not isinstance(record_id, int | str):
        raise MalformedItemError(None, "id", "is not a string or integer", kind=kind)
    return record_id


def _int_or_none(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


@dataclass(frozen=True)
class Project:
    id: int | str
    title: str
    description: str | None = None
    repo_url: str | None = None
    demo_url: str | None = None
    readme_url: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Project:
        """Build a Project from an API record.

        Raises:
            MalformedItemError: If the record is not an object, or ``id``
                or ``title`` is absent.
        """
        project_id = _require_record(record, "Project")
        title = record.get("title")
        if title is None:
            raise MalformedItemError(project_id, "title", kind="Project")
        return cls(
            id=project_id,
            title=str(title),
            description=record.get("description") or None,
            repo_url=record.get("repo_url") or None,
            demo_url=record.get("demo_url") or None,
            readme_url=record.get("readme_url") or None,
            created_at=parse_timestamp(record.get("created_at")),
        )


@dataclass(frozen=True)
class Devlog:
    id: int | str
    body: str = ""
    likes_count: int = 0
    comments_count: int = 0
    duration_seconds: int | None = None
    scrapbook_url: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Devlog:
        """Build a Devlog from an API record; only ``id`` is required."""
        devlog_id = _require_record(record, "Devlog")
        body = record.get("body")
        return cls(
            id=devlog_id,
            body=body if isinstance(body, str) else "",
            likes_count=_int_or_none(record.get("likes_count")) or 0,
            comments_count=_int_or_none(record.get("comments_count")) or 0,
            duration_seconds=_int_or_none(record.get("duration_seconds")),
            scrapbook_url=record.get("scrapbook_url") or None,
            created_at=parse_timestamp(record.get("created_at")),
        )


def order_projects(projects: Sequence[Project], sort: ProjectSort) -> list[Project]:
    """Title order (collated like item names) or newest first.

    Undated projects go last under date order. Both orders are stable.
    """
    if sort is ProjectSort.TITLE:
        return sorted(projects, key=lambda p: name_collation_key(p.title))
    return sorted(
        projects,
        key=lambda p: p.created_at.timestamp() if p.created_at else float("-inf"),
        reverse=True,
    )


def preview_body(body: str, limit: int = BODY_PREVIEW_LIMIT) -> str:
    """Cut *body* to *limit* characters, marking the cut with ``...``."""
    if len(body) <= limit:
        return body
    return body[:limit] + "..."


def format_date(value: datetime | None) -> str:
    return value.date().isoformat() if value else UNKNOWN_DATE


def format_datetime(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else UNKNOWN_DATE


def project_to_dict(project: Project) -> dict[str, Any]:
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "repo_url": project.repo_url,
        "demo_url": project.demo_url,
        "readme_url": project.readme_url,
        "created_at": project.created_at.isoformat() if project.created_at else None,
        "date_display": format_date(project.created_at),
    }


def devlog_to_dict(devlog: Devlog, *, preview: bool = False) -> dict[str, Any]:
    """Serialize a devlog; listings carry a shortened ``body``."""
    return {
        "id": devlog.id,
        "body": preview_body(devlog.body) if preview else devlog.body,
        "likes_count": devlog.likes_count,
        "comments_count": devlog.comments_count,
        "duration_seconds": devlog.duration_seconds,
        "scrapbook_url": devlog.scrapbook_url,
        "created_at": devlog.created_at.isoformat() if devlog.created_at else None,
        "date_display": format_date(devlog.created_at),
        "datetime_display": format_datetime(devlog.created_at),
    }
