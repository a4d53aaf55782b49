"""Command group: browse the store catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavortown.commands._base import FtGroup
from flavortown.domain.selection import SelectionOptions, SortMode
from flavortown.services.store import StoreService

if TYPE_CHECKING:
    from flavortown.commands._context import AppContext

_STORE_EXAMPLES = """\
  flavortown store list
  flavortown store list --sort price-desc
  flavortown store list --search sticker --no-group
  flavortown store list --type ShopItem::Accessory
  flavortown store get 42"""


@click.group(cls=FtGroup, examples=_STORE_EXAMPLES)
@click.pass_obj
def store(app: AppContext) -> None:
    """Browse store items."""


@store.command(
    name="list",
    examples="""\
  flavortown store list
  flavortown store list -s name -q lamp
  flavortown store list -t "ShopItem::Upgrade" --no-group
  flavortown --json store list --sort price-desc""",
)
@click.option(
    "-s",
    "--sort",
    "sort_mode",
    type=click.Choice([mode.value for mode in SortMode]),
    default=None,
    help="Sort by: price-asc, price-desc, name.  [default: price-asc]",
)
@click.option("-q", "--search", default=None, help="Search items by name or description.")
@click.option("-t", "--type", "type_filter", default=None, help="Filter by item type.")
@click.option(
    "--group/--no-group",
    default=None,
    help="Nest upgrades and accessories under their parent item.",
)
@click.pass_obj
def list_items(
    app: AppContext,
    sort_mode: str | None,
    search: str | None,
    type_filter: str | None,
    group: bool | None,
) -> None:
    """List store items, grouping attachments under their parent."""
    app.require_api_key("store_list")
    options = SelectionOptions(
        search=search,
        type_filter=type_filter,
        sort_mode=SortMode(sort_mode) if sort_mode else app.settings.store.sort,
        grouping=app.settings.store.group if group is None else group,
    )
    app.emit(StoreService(app.client).list_items(options))


@store.command(
    examples="""\
  flavortown store get 42
  flavortown --json store get 42"""
)
@click.argument("item_id")
@click.pass_obj
def get(app: AppContext, item_id: str) -> None:
    """Show details for a single store item."""
    app.require_api_key("store_get")
    app.emit(StoreService(app.client).get_item(item_id))
