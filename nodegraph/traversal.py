"""Depth-first walks over an adjacency snapshot.

Both walks keep their own explicit stack instead of recursing, so the
interpreter's recursion limit never applies. ``max_depth`` bounds how many
edges a walk may descend below its start before it gives up with
:class:`~nodegraph.errors.TraversalDepthError`.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator

from nodegraph.errors import TraversalDepthError
from nodegraph.index import AdjacencyIndex
from nodegraph.models import Edge

logger = logging.getLogger(__name__)

# Avoids endless walks when checking the depth of a graph.
MAX_GRAPH_DEPTH = 500

_EXHAUSTED = object()


def _too_deep(node_id: Hashable, max_depth: int) -> TraversalDepthError:
    logger.warning("Walk reached max depth %d at node %r", max_depth, node_id)
    return TraversalDepthError(node_id, max_depth)


def find_cycle(
    index: AdjacencyIndex, start_id: Hashable, max_depth: int = MAX_GRAPH_DEPTH
) -> list[Hashable]:
    """Walk from *start_id* until a node on the current path is revisited.

    Returns the path of ids up to and including the revisit (the revisited
    id appears twice), or an empty list when every branch ends. Children
    are explored in edge insertion order and the first circular path found
    wins.

    A node whose whole subtree was explored without a revisit is not
    walked again when another path reaches it: nothing below it can be on
    any later path, so it cannot close a cycle.
    """
    path: list[Hashable] = []
    on_path: set[Hashable] = set()
    # One iterator of unexplored child edges per entry in path
    pending: list[Iterator[Edge]] = []
    # Per path entry: edges down to the farthest non-leaf expanded below it
    deepest: list[int] = []
    # Finished ids -> their value from deepest, so a shortcut still honours max_depth
    finished: dict[Hashable, int] = {}

    current: object = start_id
    while current is not _EXHAUSTED:
        depth = len(path)
        if current in on_path:
            return [*path, current]

        if current in finished:
            if depth + finished[current] >= max_depth:
                raise _too_deep(current, max_depth)
            deepest[-1] = max(deepest[-1], finished[current] + 1)
        # Leaves end a branch; so does any id without outgoing edges.
        elif not index.is_leaf(current):
            if depth >= max_depth:
                raise _too_deep(current, max_depth)
            path.append(current)
            on_path.add(current)
            pending.append(iter(index.outgoing(current)))
            deepest.append(0)

        current = _EXHAUSTED
        while pending:
            edge = next(pending[-1], None)
            if edge is not None:
                current = edge.to_node_id
                break
            pending.pop()
            done = path.pop()
            on_path.discard(done)
            finished[done] = deepest.pop()
            if deepest:
                deepest[-1] = max(deepest[-1], finished[done] + 1)

    return []


def longest_path_length(
    index: AdjacencyIndex, start_id: Hashable, max_depth: int = MAX_GRAPH_DEPTH
) -> int:
    """Number of edges on the longest path from *start_id* to a leaf.

    The subgraph below *start_id* must be acyclic; a cycle runs the walk
    into ``max_depth``. Branches that stop at an id which is not a leaf
    contribute nothing. Each id is measured once and reused wherever
    another path reaches it.
    """
    # id -> edges to the farthest leaf below it (None: no leaf reachable)
    height: dict[Hashable, int | None] = {}
    # id -> edges to the farthest non-leaf below it, for the depth guard
    reach: dict[Hashable, int] = {}
    frames: list[tuple[Hashable, Iterator[Edge], list]] = []

    def enter(node_id: Hashable, depth: int) -> tuple[int | None, int] | None:
        """Known (height, reach) of *node_id*, or None after pushing a frame for it."""
        if index.is_leaf(node_id):
            return 0, -1
        if node_id in height:
            if depth + reach[node_id] >= max_depth:
                raise _too_deep(node_id, max_depth)
            return height[node_id], reach[node_id]
        if depth >= max_depth:
            raise _too_deep(node_id, max_depth)
        frames.append((node_id, iter(index.outgoing(node_id)), [None, 0]))
        return None

    def fold(acc: list, child_height: int | None, child_reach: int) -> None:
        if child_height is not None:
            acc[0] = child_height + 1 if acc[0] is None else max(acc[0], child_height + 1)
        acc[1] = max(acc[1], child_reach + 1)

    known = enter(start_id, 0)
    if known is not None:
        return known[0] or 0

    while frames:
        node_id, children, acc = frames[-1]
        edge = next(children, None)
        if edge is not None:
            child = enter(edge.to_node_id, len(frames))
            if child is not None:
                fold(acc, *child)
            continue
        frames.pop()
        height[node_id], reach[node_id] = acc
        if frames:
            fold(frames[-1][2], *acc)

    return height[start_id] or 0
