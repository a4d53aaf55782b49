"""Link resolution — turn undirected item links into parent -> child edges.

Store items list each other in ``attached_shop_item_ids`` without saying
which side is the main product. The direction is inferred:

1. If exactly one side is accessory-like, the other side is the parent.
2. Otherwise the more expensive item is the parent; on a cost tie the
   item whose link list is being scanned wins.

Each unordered pair yields at most one edge: the first discovery decides.
Resolution always runs over the full catalog, never a filtered subset.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator

import networkx as nx

from flavortown.domain.catalog import Catalog
from flavortown.domain.items import Item

logger = logging.getLogger(__name__)

ACCESSORY_MARKERS: tuple[str, ...] = ("Accessory", "Upgrade")


def is_accessory_like(type_name: str | None) -> bool:
    """True if the raw type string marks an add-on (case-sensitive substring)."""
    if not type_name:
        return False
    return any(marker in type_name for marker in ACCESSORY_MARKERS)


def orient_link(scanned: Item, linked: Item) -> tuple[Item, Item]:
    """Return ``(parent, child)`` for a link found on *scanned*'s list."""
    scanned_acc = is_accessory_like(scanned.type)
    linked_acc = is_accessory_like(linked.type)

    if scanned_acc and not linked_acc:
        return linked, scanned
    if linked_acc and not scanned_acc:
        return scanned, linked

    if scanned.sort_cost >= linked.sort_cost:
        return scanned, linked
    return linked, scanned


def iter_directed_edges(catalog: Catalog) -> Iterator[tuple[Hashable, Hashable]]:
    """Yield ``(parent_id, child_id)`` once per resolved unordered pair.

    Dangling link targets are skipped.
    """
    seen_pairs: set[frozenset[Hashable]] = set()
    for item in catalog:
        for linked_id in item.linked_ids:
            linked = catalog.get(linked_id)
            if linked is None:
                logger.debug("Skipping dangling link %r -> %r", item.id, linked_id)
                continue

            pair = frozenset((item.id, linked.id))
            if pair in seen_pairs:
                continue
            seen_pairs.add(pair)

            parent, child = orient_link(item, linked)
            yield parent.id, child.id


class Adjacency:
    """Directed parent/child view of the catalog backed by a NetworkX DiGraph."""

    def __init__(self, graph: nx.DiGraph) -> None:
        self._graph = graph

    def children_of(self, item_id: Hashable) -> set[Hashable]:
        if item_id not in self._graph:
            return set()
        return set(self._graph.successors(item_id))

    def parents_of(self, item_id: Hashable) -> set[Hashable]:
        if item_id not in self._graph:
            return set()
        return set(self._graph.predecessors(item_id))

    def has_parent(self, item_id: Hashable) -> bool:
        """True if some *other* item claims *item_id* as a child.

        A self-loop alone does not make an item a child.
        """
        return any(parent != item_id for parent in self.parents_of(item_id))

    def edges(self) -> set[tuple[Hashable, Hashable]]:
        return set(self._graph.edges())


def resolve_links(catalog: Catalog) -> Adjacency:
    """Resolve every link in *catalog* into a directed adjacency."""
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(item.id for item in catalog)
    g.add_edges_from(iter_directed_edges(catalog))
    logger.debug(
        "Resolved %d edges across %d items",
        g.number_of_edges(),
        g.number_of_nodes(),
    )
    return Adjacency(g)
