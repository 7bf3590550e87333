# src/community/local_moving.py - v1
"""Local moving phase: greedy per-node community reassignment.

Each sweep visits nodes in the working graph's enumeration order and moves
a node to the neighbouring community with the strictly largest positive
modularity gain (ties keep the first candidate seen). Sweeps repeat until
one of them moves nothing. Every move strictly increases modularity, so the
loop always terminates.
"""

from __future__ import annotations

import logging

from graphlouvain.community.state import AlteredCommunities, CommunityId, PassState
from graphlouvain.graph.base_graph import NodeId

logger = logging.getLogger(__name__)


def community_profile(
    state: PassState, node: NodeId, community: CommunityId
) -> tuple[float, float, float]:
    """Return (between, in, out) of a community as seen from ``node``.

    ``between`` is the weight linking node to the other members (both
    directions); ``in``/``out`` sum the members' degrees. The node itself
    is left out when it is a member.
    """
    between = 0.0
    total_in = 0.0
    total_out = 0.0
    for member in state.possessions.members(community):
        if member == node:
            continue
        total_in += state.indegree[member]
        total_out += state.outdegree[member]
        between += state.link_weight(node, member)
    return between, total_in, total_out


def delta_modularity(
    state: PassState,
    node: NodeId,
    old: tuple[float, float, float],
    new: tuple[float, float, float],
) -> float:
    """Modularity change of moving node from ``old`` to ``new`` community."""
    m = state.total_weight
    between_old, old_in, old_out = old
    between_new, new_in, new_out = new
    delta = (between_new - between_old) / m
    delta += state.indegree[node] * (old_out - new_out) / (m * m)
    delta += state.outdegree[node] * (old_in - new_in) / (m * m)
    return delta


def best_move(
    state: PassState, node: NodeId, altered: AlteredCommunities | None
) -> tuple[CommunityId | None, float]:
    """Find the neighbouring community with the largest positive gain."""
    community = state.belongings[node]
    old = community_profile(state, node, community)
    visited = {community}
    best_gain = 0.0
    target = None

    for neighbor in state.graph.neighbors(node):
        candidate = state.belongings[neighbor]
        if candidate in visited:
            continue
        visited.add(candidate)
        if altered is not None and not altered.should_evaluate(community, candidate):
            continue
        gain = delta_modularity(
            state, node, old, community_profile(state, node, candidate)
        )
        if gain > best_gain:
            best_gain = gain
            target = candidate

    return target, best_gain


def local_move(state: PassState, prune_unaltered: bool = True) -> bool:
    """Run sweeps until a fixpoint; return True if any node moved."""
    if state.total_weight <= 0:
        logger.warning("Total edge weight is %s, skipping local moving", state.total_weight)
        return False

    altered = AlteredCommunities() if prune_unaltered else None
    enhancing = False
    sweep = 0

    while True:
        sweep += 1
        moves = 0
        gain = 0.0
        if altered is not None:
            altered.start_sweep()

        for node in state.nodes:
            target, node_gain = best_move(state, node, altered)
            if target is None:
                continue
            gain += node_gain
            community = state.belongings[node]
            state.move(node, target)
            if altered is not None:
                altered.mark(community, target)
            moves += 1

        if altered is not None:
            altered.end_sweep()
        logger.debug(
            "Sweep %d: %d moves, modularity +%.6g, %d communities",
            sweep,
            moves,
            gain,
            state.community_count(),
        )
        if not moves:
            break
        enhancing = True

    return enhancing
