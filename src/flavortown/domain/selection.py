"""Filter and sort the working item list before rendering.

Pure functions over item sequences. The catalog and adjacency are never
touched; callers get a fresh list back.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from flavortown.domain.items import Item


class SortMode(StrEnum):
    """Orderings accepted by ``store list --sort``."""

    COST_ASC = "price-asc"
    COST_DESC = "price-desc"
    NAME = "name"


@dataclass(frozen=True)
class SelectionOptions:
    """Display options for one ``store list`` invocation."""

    search: str | None = None
    type_filter: str | None = None
    sort_mode: SortMode = SortMode.COST_ASC
    grouping: bool = True


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _char_class(ch: str) -> int:
    # punctuation and symbols < digits < letters
    if ch.isalpha():
        return 2
    if ch.isdigit():
        return 1
    return 0


def name_collation_key(name: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    """Locale-style collation key for item names.

    Compares characters first by class (punctuation and symbols, then
    digits, then letters) ignoring accents and case, then accents, then
    case with lowercase ahead of uppercase.
    """
    folded = name.casefold()
    primary = tuple((_char_class(ch), ch) for ch in _strip_accents(folded))
    return (primary, folded, name.swapcase())


def sort_key_for(mode: SortMode) -> Callable[[Item], Any]:
    """Return the key function for *mode*.

    The same key orders the top-level list and every child subset.
    """
    if mode is SortMode.COST_DESC:
        return lambda item: -item.sort_cost
    if mode is SortMode.NAME:
        return lambda item: name_collation_key(item.name)
    return lambda item: item.sort_cost


def order_items(items: Iterable[Item], mode: SortMode) -> list[Item]:
    """Stable sort of *items* by *mode*; equal keys keep input order."""
    return sorted(items, key=sort_key_for(mode))


def matches_search(item: Item, query: str) -> bool:
    """Case-insensitive substring match on name or description."""
    needle = query.casefold()
    if needle in item.name.casefold():
        return True
    return item.description is not None and needle in item.description.casefold()


def matches_type(item: Item, type_filter: str) -> bool:
    """Case-insensitive exact match on the full type string."""
    return item.type is not None and item.type.casefold() == type_filter.casefold()


def select_items(items: Iterable[Item], options: SelectionOptions) -> list[Item]:
    """Apply search, type filter, and ordering from *options*."""
    selected = list(items)
    if options.search:
        selected = [item for item in selected if matches_search(item, options.search)]
    if options.type_filter:
        selected = [item for item in selected if matches_type(item, options.type_filter)]
    return order_items(selected, options.sort_mode)
