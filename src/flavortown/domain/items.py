"""Store item records and their display-field rules.

Items are built once from API records and never mutated afterwards.
Missing optional fields map to explicit ``None`` values; the display
helpers below own the substitution rules (``N/A``, ``Unlimited``, ...).
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any

NO_DESCRIPTION = "No description"


class MalformedItemError(ValueError):
    """An upstream record is missing a required field or has the wrong shape."""

    def __init__(
        self,
        item_id: Any,
        field: str,
        problem: str = "is missing",
        *,
        kind: str = "Store item",
    ) -> None:
        self.item_id = item_id
        self.field = field
        super().__init__(f"{kind} {item_id!r}: {field} {problem}")


@dataclass(frozen=True)
class Item:
    """A single store item as loaded from the catalog."""

    id: Hashable
    name: str
    description: str | None = None
    type: str | None = None
    cost: float | None = None
    stock: int | None = None
    limited: bool = False
    linked_ids: tuple[Hashable, ...] = ()
    # Detail-only fields (store get)
    long_description: str | None = None
    max_qty: int | None = None
    one_per_person_ever: bool = False
    image_url: str | None = None

    @property
    def sort_cost(self) -> float:
        """Cost used for comparisons: absent cost counts as 0."""
        return self.cost if self.cost is not None else 0

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Item:
        """Build an Item from a deserialized store API record.

        Raises:
            MalformedItemError: If the record is not an object, ``id`` or ``name``
                is absent, or a cost or link list has the wrong shape.
        """
        if not isinstance(record, Mapping):
            raise MalformedItemError(None, "record", "is not an object")
        item_id = record.get("id")
        if item_id is None:
            raise MalformedItemError(None, "id")
        if not isinstance(item_id, int | str):
            raise MalformedItemError(None, "id", "is not a string or integer")
        name = record.get("name")
        if name is None:
            raise MalformedItemError(item_id, "name")

        ticket_cost = record.get("ticket_cost") or {}
        cost = ticket_cost.get("base_cost") if isinstance(ticket_cost, Mapping) else None
        if cost is not None and (isinstance(cost, bool) or not isinstance(cost, int | float)):
            raise MalformedItemError(item_id, "ticket_cost.base_cost", "is not a number")

        linked = record.get("attached_shop_item_ids") or ()
        if not isinstance(linked, list | tuple) or not all(
            isinstance(linked_id, int | str) for linked_id in linked
        ):
            raise MalformedItemError(item_id, "attached_shop_item_ids", "is not a list of ids")

        return cls(
            id=item_id,
            name=str(name),
            description=record.get("description") or None,
            type=record.get("type") or None,
            cost=cost,
            stock=record.get("stock"),
            limited=bool(record.get("limited", False)),
            linked_ids=tuple(linked),
            long_description=record.get("long_description") or None,
            max_qty=record.get("max_qty"),
            one_per_person_ever=bool(record.get("one_per_person_ever", False)),
            image_url=record.get("image_url") or None,
        )


def display_type(type_name: str | None) -> str:
    """Strip a namespace prefix such as ``ShopItem::`` from a type string."""
    if not type_name:
        return ""
    return type_name.rsplit("::", 1)[-1]


def format_cost(cost: float | None) -> str:
    """Format a ticket cost; absent cost displays as ``N/A``."""
    if cost is None:
        return "N/A"
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)


def stock_state(stock: int | None) -> str:
    """Classify stock as ``unlimited``, ``out_of_stock``, or ``available``."""
    if stock is None:
        return "unlimited"
    if stock == 0:
        return "out_of_stock"
    return "available"


def format_stock(stock: int | None) -> str:
    state = stock_state(stock)
    if state == "unlimited":
        return "Unlimited"
    if state == "out_of_stock":
        return "Out of Stock"
    return str(stock)


def item_to_dict(item: Item) -> dict[str, Any]:
    """Serialize the display fields of an item to a JSON-friendly dict."""
    return {
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "type": item.type,
        "display_type": display_type(item.type),
        "cost": item.cost,
        "cost_display": format_cost(item.cost),
        "stock": item.stock,
        "stock_state": stock_state(item.stock),
        "stock_display": format_stock(item.stock),
        "limited": item.limited,
    }
