# src/__init__.py - v1
"""graphlouvain: Louvain community detection and modularity scoring.

    from graphlouvain import louvain, modularity

    communities = louvain(graph)
    louvain.assign(graph)
    score = modularity(graph, communities)
"""

from __future__ import annotations

from graphlouvain.community.dendrogram import Dendrogram
from graphlouvain.community.louvain import louvain, louvain_assign, louvain_dendrogram
from graphlouvain.community.models import AttributeNames, LouvainOptions, ModularityOptions
from graphlouvain.community.modularity import modularity
from graphlouvain.graph.base_graph import BaseGraph
from graphlouvain.graph.errors import (
    EmptyGraphError,
    GraphLouvainError,
    InvalidGraphError,
    InvalidPartitionError,
    MultiGraphUnsupportedError,
    NodeNotInPartitionError,
)
from graphlouvain.graph.networkx_graph import NetworkXGraph, as_graph
from graphlouvain.version import __version__

__all__ = [
    "AttributeNames",
    "BaseGraph",
    "Dendrogram",
    "EmptyGraphError",
    "GraphLouvainError",
    "InvalidGraphError",
    "InvalidPartitionError",
    "LouvainOptions",
    "ModularityOptions",
    "MultiGraphUnsupportedError",
    "NetworkXGraph",
    "NodeNotInPartitionError",
    "__version__",
    "as_graph",
    "louvain",
    "louvain_assign",
    "louvain_dendrogram",
    "modularity",
]
