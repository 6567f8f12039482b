"""nodegraph - structural queries over an in-memory directed graph."""

from nodegraph.errors import CircularPathError, GraphError, TraversalDepthError
from nodegraph.graph import Graph
from nodegraph.index import AdjacencyIndex
from nodegraph.models import Edge, Node
from nodegraph.traversal import MAX_GRAPH_DEPTH

__version__ = "0.1.0"

__all__ = [
    "AdjacencyIndex",
    "CircularPathError",
    "Edge",
    "Graph",
    "GraphError",
    "MAX_GRAPH_DEPTH",
    "Node",
    "TraversalDepthError",
]
