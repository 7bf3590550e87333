# src/graph/networkx_graph.py - v1
"""NetworkX backend for the BaseGraph contract.

nx.Graph edges are all undirected, nx.DiGraph edges are all directed.
Multigraph classes are wrapped too, but report is_multi() so the core
rejects them before reading any edge.
"""

from __future__ import annotations

import logging
from typing import Any

import networkx as nx

from graphlouvain.graph.base_graph import BaseGraph, EdgeKey, NodeId
from graphlouvain.graph.errors import InvalidGraphError

logger = logging.getLogger(__name__)


class NetworkXGraph(BaseGraph):
    """BaseGraph adapter around a networkx graph instance.

    Edge handles are the tuples networkx yields from ``graph.edges()``
    (``(u, v)``, or ``(u, v, key)`` for multigraphs).
    """

    def __init__(self, graph: nx.Graph) -> None:
        if not isinstance(graph, nx.Graph):
            raise InvalidGraphError(
                f"expected a networkx graph, got {type(graph).__name__}"
            )
        self._graph = graph

    @property
    def nx_graph(self) -> nx.Graph:
        """Underlying networkx graph."""
        return self._graph

    def __repr__(self) -> str:
        return (
            f"NetworkXGraph({type(self._graph).__name__}, "
            f"nodes={self._graph.number_of_nodes()}, edges={self._graph.number_of_edges()})"
        )

    # --- Enumeration ---

    def nodes(self) -> list[NodeId]:
        return list(self._graph.nodes)

    def edges(self) -> list[EdgeKey]:
        if self._graph.is_multigraph():
            return list(self._graph.edges(keys=True))
        return list(self._graph.edges())

    def size(self) -> int:
        return self._graph.number_of_edges()

    def neighbors(self, node: NodeId) -> list[NodeId]:
        if not self._graph.is_directed():
            return list(self._graph.adj[node])
        result = list(self._graph.succ[node])
        seen = set(result)
        for pred in self._graph.pred[node]:
            if pred not in seen:
                seen.add(pred)
                result.append(pred)
        return result

    # --- Edges ---

    def extremities(self, edge: EdgeKey) -> tuple[NodeId, NodeId]:
        return edge[0], edge[1]  # type: ignore[index]

    def is_undirected(self, edge: EdgeKey) -> bool:
        return not self._graph.is_directed()

    def directed_edge(self, source: NodeId, target: NodeId) -> EdgeKey | None:
        if self._graph.is_directed() and self._graph.has_edge(source, target):
            return (source, target)
        return None

    def get_edge_attribute(self, edge: EdgeKey, name: str) -> Any:
        return self._graph.edges[edge].get(name)

    def set_edge_attribute(self, edge: EdgeKey, name: str, value: Any) -> None:
        self._graph.edges[edge][name] = value

    # --- Nodes ---

    def get_node_attribute(self, node: NodeId, name: str) -> Any:
        return self._graph.nodes[node].get(name)

    def set_node_attribute(self, node: NodeId, name: str, value: Any) -> None:
        self._graph.nodes[node][name] = value

    # --- Construction ---

    def add_node(self, node: NodeId) -> None:
        self._graph.add_node(node)

    def add_directed_edge(
        self, source: NodeId, target: NodeId, attributes: dict[str, Any] | None = None
    ) -> EdgeKey:
        if not self._graph.is_directed():
            raise InvalidGraphError("cannot add a directed edge to an undirected networkx graph")
        self._graph.add_edge(source, target, **(attributes or {}))
        return (source, target)

    def add_undirected_edge(
        self, source: NodeId, target: NodeId, attributes: dict[str, Any] | None = None
    ) -> EdgeKey:
        if self._graph.is_directed():
            raise InvalidGraphError("cannot add an undirected edge to a directed networkx graph")
        self._graph.add_edge(source, target, **(attributes or {}))
        return (source, target)

    def empty_copy(self) -> NetworkXGraph:
        if self._graph.is_directed():
            return NetworkXGraph(self._graph.__class__())
        # Aggregated graphs only hold directed edges.
        return NetworkXGraph(nx.DiGraph())

    # --- Structure ---

    def is_multi(self) -> bool:
        return self._graph.is_multigraph()


def as_graph(graph: Any, owner: str = "graphlouvain") -> BaseGraph:
    """Coerce a caller-supplied object into a BaseGraph.

    Args:
        graph: A BaseGraph implementation or any networkx graph.
        owner: Component name used as error message prefix.

    Returns:
        The graph itself, or a NetworkXGraph wrapping it.

    Raises:
        InvalidGraphError: If the object satisfies neither.
    """
    if isinstance(graph, BaseGraph):
        return graph
    if isinstance(graph, nx.Graph):
        return NetworkXGraph(graph)
    logger.debug("Rejected graph object of type %s", type(graph).__name__)
    raise InvalidGraphError(
        f"{owner}: the given graph is not a BaseGraph or networkx graph (got {type(graph).__name__})"
    )
