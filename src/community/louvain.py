# src/community/louvain.py - v1
"""Multi-level Louvain community detection.

Pure function over the caller's graph: each pass prepares a working graph,
moves nodes to a local modularity fixpoint, then collapses communities into
the next working graph. Passes repeat while the last one moved a node. The
final level of the dendrogram is the returned partition.

Usage:
    communities = louvain(graph)
    communities = louvain.assign(graph, {"attributes": {"community": "cluster"}})
    dendrogram = louvain.dendrogram(graph)
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from graphlouvain.community.aggregation import aggregate
from graphlouvain.community.dendrogram import Dendrogram
from graphlouvain.community.local_moving import local_move
from graphlouvain.community.models import LouvainOptions, resolve_options
from graphlouvain.community.preprocess import prepare_pass, validate_graph
from graphlouvain.community.state import CommunityId
from graphlouvain.graph.base_graph import BaseGraph, NodeId
from graphlouvain.logging.context import clear_context, set_pass_context, set_run_context

logger = logging.getLogger(__name__)


def _run(graph: BaseGraph, options: LouvainOptions) -> Dendrogram:
    weight_attribute = options.attributes.weight
    dendrogram = Dendrogram(graph.nodes())
    working = graph
    pass_index = 0

    while True:
        pass_index += 1
        set_pass_context(pass_index, "preprocess")
        state = prepare_pass(working, weight_attribute)

        set_pass_context(pass_index, "local_moving")
        enhancing = local_move(state, prune_unaltered=options.prune_unaltered)
        if not enhancing:
            logger.debug("Pass %d made no move, stopping", pass_index)
            break

        set_pass_context(pass_index, "aggregation")
        working = aggregate(state, weight_attribute)
        dendrogram.append_level(state.belongings)
        logger.debug(
            "Pass %d: %d nodes -> %d communities",
            pass_index,
            len(state.nodes),
            state.community_count(),
        )

    return dendrogram


def louvain_dendrogram(graph: Any, options: Any = None) -> Dendrogram:
    """Run Louvain and return the full per-level community history.

    Args:
        graph: A BaseGraph implementation or networkx graph (not mutated).
        options: None, LouvainOptions or a nested dict of overrides.

    Returns:
        Dendrogram whose last level is the detected partition.

    Raises:
        InvalidGraphError: If the graph contract is not satisfied.
        MultiGraphUnsupportedError: If parallel edges are possible.
        EmptyGraphError: If the graph has no edges.
    """
    base = validate_graph(graph, owner="louvain")
    resolved: LouvainOptions = resolve_options(options, LouvainOptions)

    set_run_context(uuid.uuid4().hex[:12])
    try:
        dendrogram = _run(base, resolved)
    finally:
        clear_context()

    logger.info(
        "Louvain finished: %d nodes, %d communities, %d levels",
        len(dendrogram),
        len(dendrogram.communities()),
        dendrogram.levels,
    )
    return dendrogram


def louvain(graph: Any, options: Any = None) -> dict[NodeId, CommunityId]:
    """Detect communities; return a node -> community id mapping.

    Community ids are ids of representative nodes. The graph is not mutated.
    """
    return louvain_dendrogram(graph, options).final()


def louvain_assign(graph: Any, options: Any = None) -> dict[NodeId, CommunityId]:
    """Detect communities and write them onto the graph's nodes.

    The mapping is fully computed before the first attribute write, so a
    failure leaves the graph untouched.
    """
    base = validate_graph(graph, owner="louvain")
    resolved: LouvainOptions = resolve_options(options, LouvainOptions)
    communities = louvain_dendrogram(base, resolved).final()

    attribute = resolved.attributes.community
    for node, community in communities.items():
        base.set_node_attribute(node, attribute, community)
    logger.debug("Assigned %d nodes under attribute %r", len(communities), attribute)
    return communities


louvain.assign = louvain_assign  # type: ignore[attr-defined]
louvain.dendrogram = louvain_dendrogram  # type: ignore[attr-defined]
