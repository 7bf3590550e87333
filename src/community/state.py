# src/community/state.py - v1
"""Pass-local state for the Louvain engine.

A PassState is built by the preprocessor at the start of every pass,
mutated only by the local moving phase, read by aggregation, then dropped.
Nothing here outlives a pass.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import NamedTuple

from graphlouvain.graph.base_graph import BaseGraph, NodeId

CommunityId = Hashable


class WeightedEdge(NamedTuple):
    """Edge of the working graph with its resolved weight."""

    source: NodeId
    target: NodeId
    weight: float
    undirected: bool

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


class PossessionIndex:
    """Reverse index community -> member nodes.

    Kept in lockstep with the ``belongings`` mapping: a node belongs to
    exactly one member set, and empty communities are dropped.
    """

    def __init__(self) -> None:
        self._members: dict[CommunityId, dict[NodeId, None]] = {}

    def __contains__(self, community: CommunityId) -> bool:
        return community in self._members

    def __iter__(self) -> Iterator[CommunityId]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def members(self, community: CommunityId) -> list[NodeId]:
        return list(self._members[community])

    def add(self, community: CommunityId, node: NodeId) -> None:
        self._members.setdefault(community, {})[node] = None

    def remove(self, community: CommunityId, node: NodeId) -> None:
        """Remove a member, dropping the community once empty."""
        members = self._members[community]
        del members[node]
        if not members:
            del self._members[community]


@dataclass
class AlteredCommunities:
    """Communities whose membership changed, per local-moving sweep.

    While ``is_first_iteration`` holds every candidate is evaluated. After
    that a move is skipped when neither community changed since the node
    was last visited, i.e. neither appears in the previous sweep or earlier
    in the current one: its gain is still not positive.
    """

    previous: set[CommunityId] = field(default_factory=set)
    current: set[CommunityId] = field(default_factory=set)
    is_first_iteration: bool = True

    def start_sweep(self) -> None:
        self.previous = self.current
        self.current = set()

    def end_sweep(self) -> None:
        self.is_first_iteration = False

    def mark(self, *communities: CommunityId) -> None:
        self.current.update(communities)

    def should_evaluate(self, own: CommunityId, candidate: CommunityId) -> bool:
        if self.is_first_iteration:
            return True
        changed = (self.previous, self.current)
        return any(own in s or candidate in s for s in changed)


@dataclass
class PassState:
    """Working graph, degree tables, weights and assignment for one pass."""

    graph: BaseGraph
    nodes: list[NodeId]
    edges: list[WeightedEdge]
    total_weight: float
    indegree: dict[NodeId, float]
    outdegree: dict[NodeId, float]
    # (source, target) -> weight of the edge usable from source to target
    links: dict[tuple[NodeId, NodeId], float]
    belongings: dict[NodeId, CommunityId]
    possessions: PossessionIndex

    def link_weight(self, a: NodeId, b: NodeId) -> float:
        """Total weight linking a and b, both directions."""
        return self.links.get((a, b), 0.0) + self.links.get((b, a), 0.0)

    def move(self, node: NodeId, community: CommunityId) -> None:
        """Migrate a node, keeping belongings and possessions consistent."""
        self.possessions.remove(self.belongings[node], node)
        self.belongings[node] = community
        self.possessions.add(community, node)

    def community_count(self) -> int:
        return len(self.possessions)
