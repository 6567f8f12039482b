"""Exceptions raised by graph queries."""

from __future__ import annotations

from collections.abc import Hashable, Sequence


class GraphError(Exception):
    """Base class for failures of graph queries."""


class CircularPathError(GraphError):
    """Raised when a walk that requires an acyclic graph finds a circular path."""

    def __init__(self, root_id: Hashable, path: Sequence[Hashable]) -> None:
        self.root_id = root_id
        self.path = list(path)
        super().__init__("Graph has at least one circular path. Cannot determine max depth.")


class TraversalDepthError(GraphError):
    """Raised when a walk goes deeper than its configured limit.

    This is the walk's safety net against pathological graphs, not a
    confirmed cycle.
    """

    def __init__(self, node_id: Hashable, max_depth: int) -> None:
        self.node_id = node_id
        self.max_depth = max_depth
        super().__init__(
            f"Walk exceeded max depth {max_depth} at node {node_id!r}. "
            "Potentially found a circular path (infinite recursion)."
        )
