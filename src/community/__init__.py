"""Louvain optimization engine and modularity evaluator."""
