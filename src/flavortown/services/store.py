"""StoreService — list and inspect store items.

``list_items`` runs the whole listing pipeline for one invocation:

    fetch -> Catalog -> resolve_links -> select_items -> build_forest

The adjacency is always resolved from the full catalog, so filters change
which items are shown and in what order, never who is whose parent.
"""

from __future__ import annotations

import logging
from typing import Any

from flavortown.domain.catalog import Catalog
from flavortown.domain.forest import ForestEntry, build_forest, unreached_ids
from flavortown.domain.items import Item, MalformedItemError, item_to_dict
from flavortown.domain.relations import resolve_links
from flavortown.domain.selection import SelectionOptions, select_items
from flavortown.infrastructure.api import ApiError
from flavortown.services.base import BaseService
from flavortown.services.result import ServiceResult

logger = logging.getLogger(__name__)


def entry_to_dict(entry: ForestEntry) -> dict[str, Any]:
    return {**item_to_dict(entry.item), "depth": entry.depth, "attached": entry.attached}


def build_listing(catalog: Catalog, options: SelectionOptions) -> dict[str, Any]:
    """Resolve, select, and lay out *catalog*; return the result payload.

    ``empty_reason`` is ``"no_items"`` for an empty catalog and
    ``"no_matches"`` when filters removed everything; no forest is built
    in either case.
    """
    data: dict[str, Any] = {
        "count": 0,
        "roots": 0,
        "total": len(catalog),
        "matched": 0,
        "grouped": options.grouping,
        "sort": str(options.sort_mode),
        "entries": [],
        "hidden": [],
    }
    if len(catalog) == 0:
        data["empty_reason"] = "no_items"
        return data

    adjacency = resolve_links(catalog)
    ordered = select_items(catalog, options)
    data["matched"] = len(ordered)
    if not ordered:
        data["empty_reason"] = "no_matches"
        return data

    entries = build_forest(
        ordered,
        catalog,
        adjacency,
        grouping=options.grouping,
        sort_mode=options.sort_mode,
    )
    data["count"] = len(entries)
    data["roots"] = sum(1 for entry in entries if entry.is_root)
    data["entries"] = [entry_to_dict(entry) for entry in entries]
    if options.grouping:
        data["hidden"] = unreached_ids(ordered, entries)
    return data


class StoreService(BaseService):
    """Handles store listing and single-item lookup."""

    def list_items(self, options: SelectionOptions | None = None) -> ServiceResult:
        """Fetch the catalog and build the grouped/filtered listing."""
        op = "store_list"
        options = options or SelectionOptions()

        try:
            records = self._client.list_store_items()
        except ApiError as exc:
            return self._api_failure(op, exc)

        try:
            catalog = Catalog.from_records(records)
        except MalformedItemError as exc:
            return self._malformed(op, exc)

        data = build_listing(catalog, options)
        logger.debug(
            "store_list: %d shown of %d matched, %d in catalog",
            data["count"],
            data["matched"],
            data["total"],
        )

        warnings: list[str] = []
        hidden = data["hidden"]
        if hidden:
            warnings.append(
                f"{len(hidden)} matching item(s) are attached to items outside "
                "this listing; use --no-group to list them"
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def get_item(self, item_id: str | int) -> ServiceResult:
        """Fetch a single store item with its detail fields."""
        op = "store_get"
        try:
            record = self._client.get_store_item(item_id)
        except ApiError as exc:
            return self._api_failure(op, exc)

        try:
            item = Item.from_record(record)
        except MalformedItemError as exc:
            return self._malformed(op, exc)

        data = item_to_dict(item)
        data.update(
            {
                "long_description": item.long_description,
                "max_qty": item.max_qty,
                "one_per_person_ever": item.one_per_person_ever,
                "image_url": item.image_url,
            }
        )
        return ServiceResult(ok=True, op=op, data=data)
