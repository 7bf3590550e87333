# src/community/aggregation.py - v1
"""Aggregation phase: collapse communities into a coarser working graph."""

from __future__ import annotations

import logging

from graphlouvain.community.state import CommunityId, PassState
from graphlouvain.graph.base_graph import BaseGraph

logger = logging.getLogger(__name__)


def _accumulate(
    graph: BaseGraph,
    source: CommunityId,
    target: CommunityId,
    weight: float,
    weight_attribute: str,
) -> None:
    edge = graph.directed_edge(source, target)
    if edge is None:
        graph.add_directed_edge(source, target, {weight_attribute: weight})
    else:
        current = graph.get_edge_attribute(edge, weight_attribute)
        graph.set_edge_attribute(edge, weight_attribute, current + weight)


def aggregate(state: PassState, weight_attribute: str = "weight") -> BaseGraph:
    """Build the next working graph from the pass's final assignment.

    Nodes are the surviving community ids. Every edge of the working graph
    becomes (or adds its weight to) a directed edge between its endpoints'
    communities; undirected edges also feed the mirrored direction.
    Intra-community edges become self-loops on the community node.
    """
    coarse = state.graph.empty_copy()
    for community in state.possessions:
        coarse.add_node(community)

    for edge in state.edges:
        source = state.belongings[edge.source]
        target = state.belongings[edge.target]
        _accumulate(coarse, source, target, edge.weight, weight_attribute)
        if edge.undirected and not edge.is_self_loop:
            _accumulate(coarse, target, source, edge.weight, weight_attribute)

    logger.debug(
        "Aggregated %d nodes into %d communities (%d edges)",
        len(state.nodes),
        len(state.possessions),
        coarse.size(),
    )
    return coarse
