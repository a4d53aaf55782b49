"""Forest layout — order resolved items into indented display entries.

With grouping on, only items that no other catalog item claims as a child
start a tree; their attachments are nested beneath them. With grouping
off, every selected item is listed flat and links are ignored.

Cycle safety: each branch carries the set of ids on its root-to-node
path, and a child already on that path is dropped. The same item may
still appear under two different roots.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from flavortown.domain.catalog import Catalog
from flavortown.domain.items import Item
from flavortown.domain.relations import Adjacency
from flavortown.domain.selection import SortMode, sort_key_for


@dataclass(frozen=True)
class ForestEntry:
    """One display line group: an item, its depth, and its shown attachments."""

    item: Item
    depth: int
    attached: int = 0

    @property
    def is_root(self) -> bool:
        return self.depth == 0


def _attached_items(
    item: Item,
    path: frozenset[Hashable],
    catalog: Catalog,
    adjacency: Adjacency,
    sort_mode: SortMode,
) -> list[Item]:
    """Children of *item* that exist in the catalog and are not on *path*."""
    child_ids = [cid for cid in adjacency.children_of(item.id) if cid in catalog]
    child_ids.sort(key=catalog.position)
    children = [catalog.get(cid) for cid in child_ids if cid not in path]
    return sorted((c for c in children if c is not None), key=sort_key_for(sort_mode))


def build_forest(
    ordered: Sequence[Item],
    catalog: Catalog,
    adjacency: Adjacency,
    *,
    grouping: bool = True,
    sort_mode: SortMode = SortMode.COST_ASC,
) -> list[ForestEntry]:
    """Lay out *ordered* as a pre-order list of forest entries.

    Args:
        ordered: Filtered, sorted items; defines root display order.
        catalog: Full catalog, used to resolve child ids.
        adjacency: Full-catalog parent/child edges.
        grouping: Nest attachments under their parents when True.
        sort_mode: Ordering applied to each node's children.
    """
    entries: list[ForestEntry] = []
    rendered_roots: set[Hashable] = set()

    for root in ordered:
        if grouping and adjacency.has_parent(root.id):
            continue
        if root.id in rendered_roots:
            continue
        rendered_roots.add(root.id)

        if not grouping:
            entries.append(ForestEntry(item=root, depth=0))
            continue

        # Explicit stack; children pushed in reverse to keep display order.
        stack: list[tuple[Item, int, frozenset[Hashable]]] = [(root, 0, frozenset())]
        while stack:
            item, depth, path = stack.pop()
            if item.id in path:
                continue
            branch = path | {item.id}
            children = _attached_items(item, branch, catalog, adjacency, sort_mode)
            entries.append(ForestEntry(item=item, depth=depth, attached=len(children)))
            for child in reversed(children):
                stack.append((child, depth + 1, branch))

    return entries


def unreached_ids(ordered: Sequence[Item], entries: Sequence[ForestEntry]) -> list[Hashable]:
    """Ids of *ordered* items that no entry shows.

    With grouping on, a selected item is hidden when its parent was
    filtered out, or when it sits on a link cycle where every member
    has a parent.
    """
    shown = {entry.item.id for entry in entries}
    return [item.id for item in ordered if item.id not in shown]
