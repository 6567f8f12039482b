"""Tests for the Graph engine: collections, classification, lookups."""

from __future__ import annotations

import pytest

from nodegraph.graph import Graph
from nodegraph.models import Edge, Node


# ── Collections ──────────────────────────────────────────────────────


def test_add_edge():
    graph = Graph()
    assert graph.get_edges() == []
    graph.add_edge(Edge(1, 2))
    assert graph.get_edges() == [Edge(1, 2)]


def test_add_edge_appends_at_end():
    """Edges keep insertion order; a new edge lands last."""
    graph = Graph(edges=[Edge(1, 2), Edge(2, 3)])
    graph.add_edge(Edge(3, 4))
    assert graph.get_edges() == [Edge(1, 2), Edge(2, 3), Edge(3, 4)]


def test_get_nodes_preserves_order(make_graph):
    graph = make_graph([3, 1, 2])
    assert graph.get_nodes() == [Node(3), Node(1), Node(2)]


def test_add_node_skips_uniqueness_check():
    """Duplicate ids are the caller's problem; both copies are kept."""
    graph = Graph()
    graph.add_node(Node(1))
    graph.add_node(Node(1))
    assert len(graph) == 2


def test_returned_lists_are_copies(make_graph):
    """Mutating a returned list leaves the graph untouched."""
    graph = make_graph([1, 2], [(1, 2)])
    graph.get_nodes().append(Node(9))
    graph.get_edges().clear()
    assert len(graph.nodes) == 2
    assert graph.edges == (Edge(1, 2),)


def test_constructor_copies_initial_collections():
    nodes = [Node(1)]
    graph = Graph(nodes)
    nodes.append(Node(2))
    assert graph.get_nodes() == [Node(1)]


def test_max_depth_must_be_positive():
    with pytest.raises(ValueError, match="at least 1"):
        Graph(max_depth=0)


def test_contains_and_len(make_graph):
    graph = make_graph([1, 2], [(1, 3)])
    assert 1 in graph
    assert 3 not in graph  # only referenced by an edge
    assert len(graph) == 2


def test_string_identifiers(make_graph):
    """Identifiers of any hashable type work the same way."""
    graph = make_graph(["api", "db", "cache"], [("api", "db"), ("api", "cache")])
    assert graph.get_root_nodes() == [Node("api")]
    assert graph.get_leaf_nodes() == [Node("db"), Node("cache")]
    assert graph.get_max_depth() == 1


# ── Root nodes ───────────────────────────────────────────────────────


def test_get_root_nodes_simple_tree():
    """
    1
    |
    2
    """
    graph = Graph([Node(1), Node(2)], [Edge(1, 2)])
    assert graph.get_root_nodes() == [Node(1)]


def test_get_root_nodes_two_roots(make_graph):
    """
    1   2
     \\ /
      3
    """
    graph = make_graph([1, 2, 3], [(1, 3), (2, 3)])
    assert graph.get_root_nodes() == [Node(1), Node(2)]


def test_get_root_nodes_none_in_loop(make_graph):
    """1 -> 2 -> 1 plus orphan 3 has no root."""
    graph = make_graph([1, 2, 3], [(1, 2), (2, 1)])
    assert graph.get_root_nodes() == []


def test_root_only_seen_on_edges_is_not_reported(make_graph):
    """Classification walks the node list, not edge endpoints."""
    graph = make_graph([2], [(1, 2)])
    assert graph.get_root_nodes() == []
    assert graph.get_leaf_nodes() == [Node(2)]


# ── Leaf nodes ───────────────────────────────────────────────────────


def test_get_leaf_nodes_simple_tree():
    graph = Graph([Node(1), Node(2)], [Edge(1, 2)])
    assert graph.get_leaf_nodes() == [Node(2)]


def test_get_leaf_nodes_shared_child(make_graph):
    graph = make_graph([1, 2, 3], [(1, 3), (2, 3)])
    assert graph.get_leaf_nodes() == [Node(3)]


def test_get_leaf_nodes_none_in_loop(make_graph):
    graph = make_graph([1, 2, 3], [(1, 2), (2, 1)])
    assert graph.get_leaf_nodes() == []


def test_is_leaf(make_graph):
    """
    1   2
    |
    3

    3 is a leaf, 1 is a root and 2 is an orphan, not a leaf.
    """
    graph = make_graph([1, 2, 3], [(1, 3)])
    assert graph.is_leaf(1) is False
    assert graph.is_leaf(3) is True
    assert graph.is_leaf(2) is False


def test_is_leaf_unknown_id(make_graph):
    """An edge target never added as a node is not a leaf."""
    graph = make_graph([1], [(1, 2)])
    assert graph.is_leaf(2) is False


def test_is_leaf_unhashable_id(make_graph):
    """Any value can be asked about, like find_node."""
    graph = make_graph([1, 2], [(1, 2)])
    assert graph.is_leaf([2]) is False
    assert graph.is_leaf({"id": 2}) is False
    assert graph.is_leaf(2) is True


def test_get_leaf_nodes_reports_every_duplicate():
    graph = Graph([Node(1), Node(2), Node(2)], [Edge(1, 2)])
    assert graph.get_leaf_nodes() == [Node(2), Node(2)]
    assert graph.get_root_nodes() == [Node(1)]


def test_get_root_nodes_reports_every_duplicate():
    graph = Graph([Node(1), Node(1), Node(2)], [Edge(1, 2)])
    assert graph.get_root_nodes() == [Node(1), Node(1)]
    assert graph.find_orphans() == []


# ── Orphans ──────────────────────────────────────────────────────────


def test_find_orphans():
    """Without edges every node is an orphan; one edge removes two."""
    nodes = [Node(1), Node(2), Node(3)]
    graph = Graph(nodes, [])
    assert graph.find_orphans() == nodes
    graph.add_edge(Edge(1, 3))
    assert graph.find_orphans() == [Node(2)]


def test_self_loop_node_is_neither_root_leaf_nor_orphan(make_graph):
    graph = make_graph([1], [(1, 1)])
    assert graph.get_root_nodes() == []
    assert graph.get_leaf_nodes() == []
    assert graph.find_orphans() == []


def test_classification_partitions_acyclic_graph(make_graph):
    """Without nodes that are both parent and child, every node lands in exactly one bucket."""
    graph = make_graph([1, 2, 3, 4, 5, 6], [(1, 3), (2, 3), (2, 4), (5, 4)])
    roots = graph.get_root_nodes()
    leaves = graph.get_leaf_nodes()
    orphans = graph.find_orphans()

    assert roots == [Node(1), Node(2), Node(5)]
    assert leaves == [Node(3), Node(4)]
    assert orphans == [Node(6)]
    assert sorted(n.id for n in roots + leaves + orphans) == [1, 2, 3, 4, 5, 6]


def test_internal_nodes_are_in_no_bucket(plain_tree):
    """Nodes with both a parent and a child (2, 3, 6) are not classified."""
    classified = plain_tree.get_root_nodes() + plain_tree.get_leaf_nodes() + plain_tree.find_orphans()
    assert {n.id for n in classified} == {1, 4, 5, 7}


# ── Children ─────────────────────────────────────────────────────────


def test_find_children_nodes(make_graph):
    """
         1
      / / \\ \\
     2  3  4  5
    """
    graph = make_graph([1, 2, 3, 4, 5], [(1, 2), (1, 3), (1, 4), (1, 5)])
    assert graph.find_children_nodes(1) == [Node(2), Node(3), Node(4), Node(5)]
    # A leaf has no children
    assert graph.find_children_nodes(2) == []


def test_find_children_nodes_skips_unknown_targets(make_graph):
    """Targets that were never added as nodes are left out."""
    graph = make_graph([1, 3], [(1, 2), (1, 3), (1, 4)])
    assert graph.find_children_nodes(1) == [Node(3)]


def test_find_children_nodes_follows_edge_order(make_graph):
    graph = make_graph([1, 2, 3], [(1, 3), (1, 2)])
    assert graph.find_children_nodes(1) == [Node(3), Node(2)]


def test_find_children_edges(make_graph):
    graph = make_graph([1, 2, 3], [(1, 2), (2, 3), (1, 3)])
    assert graph.find_children_edges(1) == [Edge(1, 2), Edge(1, 3)]
    assert graph.find_children_edges(3) == []


# ── Lookup ───────────────────────────────────────────────────────────


def test_find_node(make_graph):
    graph = make_graph([1, 2])
    assert graph.find_node(2) == Node(2)


def test_find_node_not_found(make_graph):
    graph = make_graph([1, 2])
    assert graph.find_node(7) is None


def test_find_node_returns_first_duplicate():
    first = Node(1)
    graph = Graph([first, Node(1)])
    assert graph.find_node(1) is first
