"""Directed graph of identifier-bearing nodes and the queries over it."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic

from nodegraph.errors import CircularPathError
from nodegraph.index import AdjacencyIndex
from nodegraph.models import Edge, IdT, Node
from nodegraph.traversal import MAX_GRAPH_DEPTH, find_cycle, longest_path_length

logger = logging.getLogger(__name__)


class Graph(Generic[IdT]):
    """A directed graph: an ordered list of nodes and an ordered list of edges.

    Both lists are append-only and keep insertion order, which is the order
    every node query reports in. Nothing is cached between queries; each one
    classifies nodes from the current lists.

    Node ids are expected to be unique. Duplicates are not rejected, and
    lookups by id then return whichever node was added first.

    Not safe for appends concurrent with queries; serialize writers.
    """

    def __init__(
        self,
        nodes: Iterable[Node[IdT]] = (),
        edges: Iterable[Edge[IdT]] = (),
        *,
        max_depth: int = MAX_GRAPH_DEPTH,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self._nodes: list[Node[IdT]] = list(nodes)
        self._edges: list[Edge[IdT]] = list(edges)
        self.max_depth = max_depth

    @classmethod
    def from_ids(
        cls,
        node_ids: Iterable[IdT],
        edge_pairs: Iterable[tuple[IdT, IdT]] = (),
        **kwargs,
    ) -> Graph[IdT]:
        """Build a graph from raw ids and ``(from, to)`` pairs."""
        return cls(
            [Node(node_id) for node_id in node_ids],
            [Edge(src, dst) for src, dst in edge_pairs],
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Nodes and edges
    # ------------------------------------------------------------------

    def add_node(self, node: Node[IdT]) -> None:
        self._nodes.append(node)

    def add_edge(self, edge: Edge[IdT]) -> None:
        self._edges.append(edge)

    def get_nodes(self) -> list[Node[IdT]]:
        return list(self._nodes)

    def get_edges(self) -> list[Edge[IdT]]:
        return list(self._edges)

    @property
    def nodes(self) -> tuple[Node[IdT], ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge[IdT], ...]:
        return tuple(self._edges)

    def find_node(self, node_id: IdT) -> Node[IdT] | None:
        """Return the first node whose id equals *node_id*, or None."""
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None

    def _index(self) -> AdjacencyIndex:
        return AdjacencyIndex(self._nodes, self._edges)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def get_root_nodes(self) -> list[Node[IdT]]:
        """Nodes with at least one child and no parent."""
        return self._index().roots()

    def get_leaf_nodes(self) -> list[Node[IdT]]:
        """Nodes with at least one parent and no children."""
        return self._index().leaves()

    def find_orphans(self) -> list[Node[IdT]]:
        """Nodes with neither a parent nor a child."""
        return self._index().orphans()

    def is_leaf(self, node_id: IdT) -> bool:
        """Whether *node_id* belongs to a leaf node.

        Orphans are not leaves, and neither is an id that only appears on
        edges without ever being added as a node. Ids are compared with
        ``==`` like :meth:`find_node`, so any value can be asked about.
        """
        return any(leaf.id == node_id for leaf in self._index().leaves())

    def find_children_edges(self, node_id: IdT) -> list[Edge[IdT]]:
        """Outgoing edges of *node_id*, in edge insertion order."""
        return [edge for edge in self._edges if edge.from_node_id == node_id]

    def find_children_nodes(self, node_id: IdT) -> list[Node[IdT]]:
        """Direct children of *node_id* that were added as nodes."""
        children: list[Node[IdT]] = []
        for edge in self.find_children_edges(node_id):
            child = self.find_node(edge.to_node_id)
            if child is not None:
                children.append(child)
        return children

    # ------------------------------------------------------------------
    # Circular paths
    # ------------------------------------------------------------------

    def find_circular_path(self, node_id: IdT) -> list[IdT]:
        """The first circular path reachable from *node_id*, or an empty list."""
        return self._find_circular_path(self._index(), node_id)

    def _find_circular_path(self, index: AdjacencyIndex, node_id: IdT) -> list[IdT]:
        path = find_cycle(index, node_id, self.max_depth)
        if path:
            logger.debug("Circular path from %r: %s", node_id, path)
        return path

    def has_circular_paths(self) -> bool:
        """Whether a walk from any root node revisits a node on its path.

        Only roots start a walk. A cycle that no root leads into (for
        instance a graph that is a single loop) is not reported here;
        :meth:`find_all_circular_paths` walks from every node instead.
        """
        index = self._index()
        return any(self._find_circular_path(index, root.id) for root in index.roots())

    def find_all_circular_paths(self) -> list[list[IdT]]:
        """One circular path per node that starts one, in node order.

        Each path holds the ids visited up to and including the revisited
        one, so the revisited id appears twice.
        """
        index = self._index()
        circles: list[list[IdT]] = []
        for node in index.nodes:
            path = self._find_circular_path(index, node.id)
            if path:
                circles.append(path)
        return circles

    # ------------------------------------------------------------------
    # Depth
    # ------------------------------------------------------------------

    def get_max_depth(self) -> int:
        """Length, in edges, of the longest path from a root node to a leaf.

        Raises:
            CircularPathError: a walk from some root revisits a node. No
                partial depth is returned in that case.
            TraversalDepthError: a walk went deeper than ``max_depth``.
        """
        index = self._index()
        max_path_length = 0
        for root in index.roots():
            circle = self._find_circular_path(index, root.id)
            if circle:
                logger.warning("Cannot determine max depth, circular path from %r: %s", root.id, circle)
                raise CircularPathError(root.id, circle)
            max_path_length = max(max_path_length, longest_path_length(index, root.id, self.max_depth))

        logger.debug("Max depth %d over %d node(s)", max_path_length, len(index.nodes))
        return max_path_length

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return self.find_node(node_id) is not None

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"
