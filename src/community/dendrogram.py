# src/community/dendrogram.py - v1
"""Per-node community history across Louvain passes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from graphlouvain.community.state import CommunityId
from graphlouvain.graph.base_graph import NodeId


class Dendrogram:
    """Append-only mapping original node -> community id per level.

    Level 0 is the node itself; every enhancing pass appends one level.
    """

    def __init__(self, nodes: Iterable[NodeId]) -> None:
        self._history: dict[NodeId, list[CommunityId]] = {node: [node] for node in nodes}

    def __len__(self) -> int:
        return len(self._history)

    def __contains__(self, node: object) -> bool:
        return node in self._history

    @property
    def levels(self) -> int:
        """Number of recorded levels, level 0 included."""
        if not self._history:
            return 0
        return len(next(iter(self._history.values())))

    def nodes(self) -> list[NodeId]:
        return list(self._history)

    def history(self, node: NodeId) -> list[CommunityId]:
        return list(self._history[node])

    def append_level(self, belongings: Mapping[NodeId, CommunityId]) -> None:
        """Record the community each node's latest id was assigned to."""
        for sequence in self._history.values():
            sequence.append(belongings[sequence[-1]])

    def partition(self, level: int = -1) -> dict[NodeId, CommunityId]:
        """Node -> community mapping at the given level (default: last)."""
        return {node: sequence[level] for node, sequence in self._history.items()}

    def communities(self, level: int = -1) -> list[list[NodeId]]:
        """Groups of nodes sharing a community at the given level."""
        groups: dict[CommunityId, list[NodeId]] = {}
        for node, community in self.partition(level).items():
            groups.setdefault(community, []).append(node)
        return list(groups.values())

    def final(self) -> dict[NodeId, CommunityId]:
        return self.partition(-1)
