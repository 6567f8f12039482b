"""Per-query adjacency snapshot of a graph's nodes and edges."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterable

from nodegraph.models import Edge, Node


class AdjacencyIndex:
    """Parent/child participation of every identifier, built in one pass.

    An index reflects the nodes and edges it was built from. Graph queries
    build a fresh one per call, so appends made after construction are not
    visible here.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        self.nodes: tuple[Node, ...] = tuple(nodes)
        # from_node_id -> outgoing edges, in edge insertion order
        self._outgoing: dict[Hashable, list[Edge]] = defaultdict(list)
        self._targets: set[Hashable] = set()
        for edge in edges:
            self._outgoing[edge.from_node_id].append(edge)
            self._targets.add(edge.to_node_id)

        self._leaf_ids = {n.id for n in self.nodes if self.is_child(n.id) and not self.is_parent(n.id)}

    def is_parent(self, node_id: Hashable) -> bool:
        return node_id in self._outgoing

    def is_child(self, node_id: Hashable) -> bool:
        return node_id in self._targets

    def is_root(self, node_id: Hashable) -> bool:
        return self.is_parent(node_id) and not self.is_child(node_id)

    def is_orphan(self, node_id: Hashable) -> bool:
        return not self.is_parent(node_id) and not self.is_child(node_id)

    def is_leaf(self, node_id: Hashable) -> bool:
        """Only ids of added nodes can be leaves; bare edge endpoints cannot."""
        return node_id in self._leaf_ids

    def outgoing(self, node_id: Hashable) -> list[Edge]:
        # .get keeps lookups of unknown ids from growing the defaultdict
        return list(self._outgoing.get(node_id, ()))

    def roots(self) -> list[Node]:
        return [n for n in self.nodes if self.is_root(n.id)]

    def leaves(self) -> list[Node]:
        return [n for n in self.nodes if self.is_leaf(n.id)]

    def orphans(self) -> list[Node]:
        return [n for n in self.nodes if self.is_orphan(n.id)]
