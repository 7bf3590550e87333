# tests/conftest.py - v1
"""Shared test fixtures for all unit and integration tests.

Provides the small reference graphs used across the suite and an in-memory
mixed-directedness BaseGraph implementation.
"""

from __future__ import annotations

from typing import Any

import networkx as nx
import pytest

from graphlouvain.graph.base_graph import BaseGraph, EdgeKey, NodeId


# === Mixed graph backend ===


class MixedGraph(BaseGraph):
    """Minimal BaseGraph holding directed and undirected edges side by side.

    Edge handles are insertion indices. Neighbours are listed in order of
    first incidence.
    """

    def __init__(self) -> None:
        self._nodes: dict[NodeId, dict[str, Any]] = {}
        self._edges: list[tuple[NodeId, NodeId, bool, dict[str, Any]]] = []
        self._adj: dict[NodeId, dict[NodeId, None]] = {}
        self._directed: dict[tuple[NodeId, NodeId], int] = {}
        self._undirected: dict[tuple[NodeId, NodeId], int] = {}
        self.attribute_writes = 0

    def _link(self, source: NodeId, target: NodeId) -> None:
        self._adj[source][target] = None
        self._adj[target][source] = None

    def nodes(self) -> list[NodeId]:
        return list(self._nodes)

    def edges(self) -> list[EdgeKey]:
        return list(range(len(self._edges)))

    def size(self) -> int:
        return len(self._edges)

    def neighbors(self, node: NodeId) -> list[NodeId]:
        return list(self._adj[node])

    def extremities(self, edge: EdgeKey) -> tuple[NodeId, NodeId]:
        source, target, _, _ = self._edges[edge]
        return source, target

    def is_undirected(self, edge: EdgeKey) -> bool:
        return self._edges[edge][2]

    def directed_edge(self, source: NodeId, target: NodeId) -> EdgeKey | None:
        return self._directed.get((source, target))

    def get_edge_attribute(self, edge: EdgeKey, name: str) -> Any:
        return self._edges[edge][3].get(name)

    def set_edge_attribute(self, edge: EdgeKey, name: str, value: Any) -> None:
        self._edges[edge][3][name] = value

    def get_node_attribute(self, node: NodeId, name: str) -> Any:
        return self._nodes[node].get(name)

    def set_node_attribute(self, node: NodeId, name: str, value: Any) -> None:
        self.attribute_writes += 1
        self._nodes[node][name] = value

    def add_node(self, node: NodeId) -> None:
        if node not in self._nodes:
            self._nodes[node] = {}
            self._adj[node] = {}

    def add_directed_edge(
        self, source: NodeId, target: NodeId, attributes: dict[str, Any] | None = None
    ) -> EdgeKey:
        self.add_node(source)
        self.add_node(target)
        self._edges.append((source, target, False, dict(attributes or {})))
        edge = len(self._edges) - 1
        self._directed[(source, target)] = edge
        self._link(source, target)
        return edge

    def add_undirected_edge(
        self, source: NodeId, target: NodeId, attributes: dict[str, Any] | None = None
    ) -> EdgeKey:
        self.add_node(source)
        self.add_node(target)
        self._edges.append((source, target, True, dict(attributes or {})))
        edge = len(self._edges) - 1
        self._undirected[(source, target)] = edge
        self._undirected[(target, source)] = edge
        self._link(source, target)
        return edge

    def empty_copy(self) -> MixedGraph:
        return MixedGraph()

    def is_multi(self) -> bool:
        return False


# === Graph builders ===

CLIQUES = [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11]]
BRIDGES = [(3, 4), (7, 8), (11, 0)]


def build_clique_ring() -> nx.Graph:
    """Three 4-cliques joined in a ring by single bridges (12 nodes, 21 edges)."""
    g = nx.Graph()
    for clique in CLIQUES:
        for i, u in enumerate(clique):
            for v in clique[i + 1:]:
                g.add_edge(u, v)
    g.add_edges_from(BRIDGES)
    return g


@pytest.fixture
def clique_ring() -> nx.Graph:
    return build_clique_ring()


@pytest.fixture
def triangle() -> nx.Graph:
    g = nx.Graph()
    g.add_edges_from([(1, 2), (1, 3), (2, 3)])
    return g


@pytest.fixture
def weighted_five() -> nx.Graph:
    """5-node weighted undirected graph, unweighted edges default to 1."""
    g = nx.Graph()
    g.add_nodes_from([1, 2, 3, 4, 5])
    g.add_edge(1, 2, weight=30)
    g.add_edge(1, 5)
    g.add_edge(2, 3, weight=15)
    g.add_edge(2, 4, weight=10)
    g.add_edge(2, 5)
    g.add_edge(3, 4, weight=5)
    g.add_edge(4, 5, weight=100)
    return g


@pytest.fixture
def directed_five() -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from([1, 2, 3, 4, 5])
    g.add_edges_from([(1, 2), (1, 5), (2, 3), (3, 4), (4, 2), (5, 1)])
    return g


@pytest.fixture
def mixed_clique_ring() -> MixedGraph:
    """Clique ring whose cliques are undirected and bridges directed."""
    g = MixedGraph()
    for clique in CLIQUES:
        for i, u in enumerate(clique):
            for v in clique[i + 1:]:
                g.add_undirected_edge(u, v)
    for source, target in BRIDGES:
        g.add_directed_edge(source, target)
    return g


@pytest.fixture
def edgeless() -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from([1, 2])
    return g


@pytest.fixture
def mixed_graph_cls() -> type[MixedGraph]:
    return MixedGraph
