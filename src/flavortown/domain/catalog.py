"""Catalog — the full set of store items for one invocation, keyed by id.

IDs are assumed unique upstream. If a duplicate slips through, the
later record replaces the earlier one in lookups while iteration keeps
the original load order.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any

from flavortown.domain.items import Item


class Catalog:
    """Read-only, ordered collection of items with id lookup."""

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: tuple[Item, ...] = tuple(items)
        self._by_id: dict[Hashable, Item] = {item.id: item for item in self._items}
        self._position: dict[Hashable, int] = {
            item.id: index for index, item in enumerate(self._items)
        }

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> Catalog:
        """Build a catalog from API records (raises MalformedItemError)."""
        return cls(Item.from_record(record) for record in records)

    def get(self, item_id: Hashable) -> Item | None:
        return self._by_id.get(item_id)

    def position(self, item_id: Hashable) -> int:
        """Load-order index of *item_id*."""
        return self._position[item_id]

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
