"""Command group: browse projects."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavortown.commands._base import FtGroup
from flavortown.domain.projects import ProjectSort
from flavortown.services.projects import ProjectService

if TYPE_CHECKING:
    from flavortown.commands._context import AppContext


@click.group(
    cls=FtGroup,
    examples="""\
  flavortown projects list
  flavortown projects list --query rover --sort title
  flavortown projects get 7""",
)
@click.pass_obj
def projects(app: AppContext) -> None:
    """Browse Flavortown projects."""


@projects.command(
    name="list",
    examples="""\
  flavortown projects list
  flavortown projects list -p 2
  flavortown projects list -q rover -s title
  flavortown --json projects list""",
)
@click.option(
    "-p",
    "--page",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Page number.",
)
@click.option("-q", "--query", default=None, help="Search projects.")
@click.option(
    "-s",
    "--sort",
    "sort",
    type=click.Choice([mode.value for mode in ProjectSort]),
    default=ProjectSort.DATE.value,
    show_default=True,
    help="Sort by: title, date (newest first).",
)
@click.pass_obj
def list_projects(app: AppContext, page: int, query: str | None, sort: str) -> None:
    """List one page of projects."""
    app.require_api_key("project_list")
    app.emit(ProjectService(app.client).list_projects(page, query, ProjectSort(sort)))


@projects.command(
    examples="""\
  flavortown projects get 7
  flavortown --json projects get 7"""
)
@click.argument("project_id")
@click.pass_obj
def get(app: AppContext, project_id: str) -> None:
    """Show details for a single project."""
    app.require_api_key("project_get")
    app.emit(ProjectService(app.client).get_project(project_id))
