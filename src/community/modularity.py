# src/community/modularity.py - v1
"""Modularity of a partition, computed by edge enumeration.

Directed edges are scored like undirected ones (Gephi-style):
    - a -> b and b -> a both present: treated as a single a <-> b link
    - only one of them present: also treated as a <-> b
    - both present with different weights: only one weight is used, and
      which one depends on edge enumeration order
Self-loops are ignored entirely, so removing them leaves the score unchanged.

    Q = sum_c [internal(c) - total(c)^2 / M] / M
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from graphlouvain.community.models import ModularityOptions, resolve_options
from graphlouvain.community.state import CommunityId
from graphlouvain.community.weights import resolve_weight
from graphlouvain.graph.base_graph import BaseGraph, NodeId
from graphlouvain.graph.errors import (
    EmptyGraphError,
    InvalidPartitionError,
    MultiGraphUnsupportedError,
    NodeNotInPartitionError,
)
from graphlouvain.graph.networkx_graph import as_graph

logger = logging.getLogger(__name__)


def partition_belongings(communities: Any) -> dict[NodeId, CommunityId]:
    """Normalize a partition into a node -> community id mapping.

    Accepts a mapping (used as-is) or a sequence of disjoint node groups
    (group index becomes the community id).

    Raises:
        InvalidPartitionError: If the partition is malformed or empty.
    """
    if isinstance(communities, Mapping):
        if not communities:
            raise InvalidPartitionError("modularity: the given communities mapping is empty")
        for node, community in communities.items():
            try:
                hash(community)
            except TypeError as exc:
                raise InvalidPartitionError(
                    f"modularity: community id of node {node!r} is not hashable"
                ) from exc
        return dict(communities)

    if isinstance(communities, (str, bytes)) or not isinstance(communities, Iterable):
        raise InvalidPartitionError(
            f"modularity: the given communities set is invalid ({type(communities).__name__})"
        )

    belongings: dict[NodeId, CommunityId] = {}
    for index, group in enumerate(communities):
        if isinstance(group, (str, bytes, Mapping)) or not isinstance(group, Iterable):
            raise InvalidPartitionError(
                f"modularity: community #{index} is not a group of nodes"
            )
        for node in group:
            try:
                duplicate = node in belongings
            except TypeError as exc:
                raise InvalidPartitionError(
                    f"modularity: node {node!r} in community #{index} is not hashable"
                ) from exc
            if duplicate:
                raise InvalidPartitionError(
                    f"modularity: node {node!r} appears in more than one community"
                )
            belongings[node] = index

    if not belongings:
        raise InvalidPartitionError("modularity: the given communities set is empty")
    return belongings


def community_weights(
    graph: BaseGraph,
    belongings: Mapping[NodeId, CommunityId],
    weight_attribute: str = "weight",
) -> tuple[dict[CommunityId, float], dict[CommunityId, float], float]:
    """Accumulate (internal, total, M) over the graph's edges."""
    internal: dict[CommunityId, float] = {c: 0.0 for c in belongings.values()}
    total: dict[CommunityId, float] = dict(internal)
    m = 0.0

    for edge in graph.edges():
        source, target = graph.extremities(edge)
        if source == target:
            continue

        source_community = belongings[source]
        target_community = belongings[target]
        weight = resolve_weight(graph.get_edge_attribute(edge, weight_attribute))
        reverse = graph.has_directed_edge(target, source)

        total[source_community] += weight
        if graph.is_undirected(edge) or not reverse:
            total[target_community] += weight
            m += 2 * weight
        else:
            m += weight

        # A one-way link is counted from both endpoints above.
        if not reverse:
            weight *= 2

        if source_community == target_community:
            internal[source_community] += weight

    return internal, total, m


def modularity(graph: Any, communities: Any, options: Any = None) -> float:
    """Score a partition of the graph.

    Args:
        graph: A BaseGraph implementation or networkx graph.
        communities: Sequence of disjoint node groups, or node -> community mapping.
        options: None, ModularityOptions or a nested dict of overrides.

    Returns:
        Modularity Q of the partition.

    Raises:
        InvalidGraphError: If the graph contract is not satisfied.
        MultiGraphUnsupportedError: If parallel edges are possible.
        InvalidPartitionError: If the partition is malformed or empty.
        EmptyGraphError: If the graph has no edges.
        NodeNotInPartitionError: If a graph node is absent from the partition.
    """
    base = as_graph(graph, owner="modularity")
    if base.is_multi():
        raise MultiGraphUnsupportedError("modularity: multigraphs are not handled")
    belongings = partition_belongings(communities)
    if not base.size():
        raise EmptyGraphError("modularity: the graph has no edges")
    for node in base.nodes():
        if node not in belongings:
            raise NodeNotInPartitionError(node)

    resolved: ModularityOptions = resolve_options(options, ModularityOptions)
    internal, total, m = community_weights(base, belongings, resolved.attributes.weight)
    if m == 0:
        logger.warning("Total edge weight is zero, modularity defaults to 0.0")
        return 0.0

    q = sum(internal[c] - total[c] * total[c] / m for c in total)
    return q / m
