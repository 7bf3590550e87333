# src/graph/errors.py - v1
"""Error taxonomy shared by community detection and modularity scoring.

Every error is a caller-contract violation raised before any computation
or mutation starts. None of them is transient, so nothing here is retried.
"""

from __future__ import annotations

from typing import Any


class GraphLouvainError(ValueError):
    """Base class for all input validation errors."""


class InvalidGraphError(GraphLouvainError):
    """Raised when the input does not satisfy the graph contract."""


class MultiGraphUnsupportedError(GraphLouvainError):
    """Raised when the graph structurally allows parallel edges."""


class EmptyGraphError(GraphLouvainError):
    """Raised when the graph has no edges."""


class InvalidPartitionError(GraphLouvainError):
    """Raised when a partition is neither a group sequence nor a mapping, or is empty."""


class NodeNotInPartitionError(GraphLouvainError):
    """Raised when a graph node is absent from the given partition."""

    def __init__(self, node: Any, message: str | None = None) -> None:
        self.node = node
        super().__init__(
            message or f"modularity: node {node!r} is not part of the given partition"
        )
