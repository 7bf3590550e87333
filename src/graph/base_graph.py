# src/graph/base_graph.py - v1
"""Abstract graph interface consumed by the community detection core.

The core never touches a storage backend directly: it only enumerates,
queries and builds graphs through this contract. Backends live in sibling
modules (see networkx_graph.py).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any

NodeId = Hashable
EdgeKey = Hashable


class BaseGraph(ABC):
    """Unified interface for simple (non-multi) weighted graphs."""

    # --- Enumeration ---

    @abstractmethod
    def nodes(self) -> list[NodeId]:
        """All node ids, in a stable enumeration order."""

    @abstractmethod
    def edges(self) -> list[EdgeKey]:
        """All edge handles, in a stable enumeration order."""

    @abstractmethod
    def size(self) -> int:
        """Number of edges."""

    @abstractmethod
    def neighbors(self, node: NodeId) -> list[NodeId]:
        """Adjacent nodes (both directions), each listed once."""

    # --- Edges ---

    @abstractmethod
    def extremities(self, edge: EdgeKey) -> tuple[NodeId, NodeId]:
        """Ordered (source, target) pair of an edge."""

    @abstractmethod
    def is_undirected(self, edge: EdgeKey) -> bool:
        """Whether the edge is undirected."""

    @abstractmethod
    def directed_edge(self, source: NodeId, target: NodeId) -> EdgeKey | None:
        """Directed edge from source to target, or None."""

    def has_directed_edge(self, source: NodeId, target: NodeId) -> bool:
        return self.directed_edge(source, target) is not None

    @abstractmethod
    def get_edge_attribute(self, edge: EdgeKey, name: str) -> Any:
        """Edge attribute value, None when unset."""

    @abstractmethod
    def set_edge_attribute(self, edge: EdgeKey, name: str, value: Any) -> None:
        """Set an edge attribute."""

    # --- Nodes ---

    @abstractmethod
    def get_node_attribute(self, node: NodeId, name: str) -> Any:
        """Node attribute value, None when unset."""

    @abstractmethod
    def set_node_attribute(self, node: NodeId, name: str, value: Any) -> None:
        """Set a node attribute."""

    # --- Construction ---

    @abstractmethod
    def add_node(self, node: NodeId) -> None:
        """Add a node (no-op if present)."""

    @abstractmethod
    def add_directed_edge(
        self, source: NodeId, target: NodeId, attributes: dict[str, Any] | None = None
    ) -> EdgeKey:
        """Add a directed edge and return its handle."""

    @abstractmethod
    def add_undirected_edge(
        self, source: NodeId, target: NodeId, attributes: dict[str, Any] | None = None
    ) -> EdgeKey:
        """Add an undirected edge and return its handle."""

    @abstractmethod
    def empty_copy(self) -> BaseGraph:
        """Empty graph of the same backend, able to hold directed edges."""

    # --- Structure ---

    @abstractmethod
    def is_multi(self) -> bool:
        """Whether parallel edges are structurally allowed."""
