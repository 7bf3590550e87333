# src/community/preprocess.py - v1
"""Pass preprocessor: total weight, degree tables and singleton communities."""

from __future__ import annotations

import logging
from typing import Any

from graphlouvain.community.state import PassState, PossessionIndex, WeightedEdge
from graphlouvain.community.weights import resolve_weight
from graphlouvain.graph.base_graph import BaseGraph
from graphlouvain.graph.errors import EmptyGraphError, MultiGraphUnsupportedError
from graphlouvain.graph.networkx_graph import as_graph

logger = logging.getLogger(__name__)


def validate_graph(graph: Any, owner: str = "louvain") -> BaseGraph:
    """Check the graph contract before any computation or mutation.

    Raises:
        InvalidGraphError: If graph is neither a BaseGraph nor a networkx graph.
        MultiGraphUnsupportedError: If parallel edges are structurally allowed.
        EmptyGraphError: If the graph has no edges.
    """
    base = as_graph(graph, owner=owner)
    if base.is_multi():
        raise MultiGraphUnsupportedError(f"{owner}: multigraphs are not handled")
    if not base.size():
        raise EmptyGraphError(f"{owner}: the graph has no edges")
    return base


def read_edges(graph: BaseGraph, weight_attribute: str) -> list[WeightedEdge]:
    """Enumerate edges once, resolving weights."""
    edges: list[WeightedEdge] = []
    for edge in graph.edges():
        source, target = graph.extremities(edge)
        edges.append(
            WeightedEdge(
                source=source,
                target=target,
                weight=resolve_weight(graph.get_edge_attribute(edge, weight_attribute)),
                undirected=graph.is_undirected(edge),
            )
        )
    return edges


def prepare_pass(graph: BaseGraph, weight_attribute: str = "weight") -> PassState:
    """Build the state of one pass over the current working graph.

    Undirected edges count twice in M and feed both degree directions of
    both endpoints; undirected self-loops and directed edges count once.
    Every node starts alone in the community named after itself.
    """
    nodes = graph.nodes()
    edges = read_edges(graph, weight_attribute)

    belongings = {}
    possessions = PossessionIndex()
    indegree: dict = {}
    outdegree: dict = {}
    for node in nodes:
        belongings[node] = node
        possessions.add(node, node)
        indegree[node] = 0.0
        outdegree[node] = 0.0

    total_weight = 0.0
    links: dict = {}
    for edge in edges:
        source, target, weight = edge.source, edge.target, edge.weight
        outdegree[source] += weight
        indegree[target] += weight
        links[(source, target)] = links.get((source, target), 0.0) + weight
        if edge.undirected and not edge.is_self_loop:
            indegree[source] += weight
            outdegree[target] += weight
            links[(target, source)] = links.get((target, source), 0.0) + weight
            total_weight += 2 * weight
        else:
            total_weight += weight

    logger.debug(
        "Prepared pass: %d nodes, %d edges, M=%s", len(nodes), len(edges), total_weight
    )
    return PassState(
        graph=graph,
        nodes=nodes,
        edges=edges,
        total_weight=total_weight,
        indegree=indegree,
        outdegree=outdegree,
        links=links,
        belongings=belongings,
        possessions=possessions,
    )
