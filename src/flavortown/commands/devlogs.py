"""Command group: read project devlogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavortown.commands._base import FtGroup
from flavortown.services.devlogs import DevlogService

if TYPE_CHECKING:
    from flavortown.commands._context import AppContext


@click.group(
    cls=FtGroup,
    examples="""\
  flavortown devlogs list 7
  flavortown devlogs get 7 3""",
)
@click.pass_obj
def devlogs(app: AppContext) -> None:
    """Read the devlogs posted on a project."""


@devlogs.command(
    name="list",
    examples="""\
  flavortown devlogs list 7
  flavortown devlogs list 7 --page 2
  flavortown --quiet devlogs list 7""",
)
@click.argument("project_id")
@click.option(
    "-p",
    "--page",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Page number.",
)
@click.pass_obj
def list_devlogs(app: AppContext, project_id: str, page: int) -> None:
    """List one page of a project's devlogs."""
    app.require_api_key("devlog_list")
    app.emit(DevlogService(app.client).list_devlogs(project_id, page))


@devlogs.command(
    examples="""\
  flavortown devlogs get 7 3
  flavortown --json devlogs get 7 3"""
)
@click.argument("project_id")
@click.argument("devlog_id")
@click.pass_obj
def get(app: AppContext, project_id: str, devlog_id: str) -> None:
    """Show a single devlog in full."""
    app.require_api_key("devlog_get")
    app.emit(DevlogService(app.client).get_devlog(project_id, devlog_id))
