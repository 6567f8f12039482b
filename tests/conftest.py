"""Shared test fixtures for nodegraph."""

import pytest

from nodegraph.config.models import NodegraphConfig
from nodegraph.graph import Graph


@pytest.fixture
def make_graph():
    """Build a graph from node ids and ``(from, to)`` pairs."""

    def _make(node_ids, edge_pairs=(), **kwargs):
        return Graph.from_ids(node_ids, edge_pairs, **kwargs)

    return _make


@pytest.fixture
def cyclic_tree(make_graph):
    """Root 1 with a circular path 3 -> 6 -> 7 -> 3.

           1
          / \\
         2   3 <- 7
        /   / \\  /
       4   5   6
    """
    return make_graph(
        [1, 2, 3, 4, 5, 6, 7],
        [(1, 2), (2, 4), (1, 3), (3, 5), (3, 6), (6, 7), (7, 3)],
    )


@pytest.fixture
def plain_tree(make_graph):
    """Same shape as ``cyclic_tree`` without the back edge 7 -> 3."""
    return make_graph(
        [1, 2, 3, 4, 5, 6, 7],
        [(1, 2), (2, 4), (1, 3), (3, 5), (3, 6), (6, 7)],
    )


@pytest.fixture
def loop_graph(make_graph):
    """1 -> 2 -> 3 -> 2"""
    return make_graph([1, 2, 3], [(1, 2), (2, 3), (3, 2)])


@pytest.fixture
def sample_config():
    return NodegraphConfig()
