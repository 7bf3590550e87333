# tests/unit/community/test_louvain.py - v1
"""Tests for community/louvain.py: multi-level driver and assign mode."""

from __future__ import annotations

import random

import networkx as nx
import pytest

from graphlouvain.community.louvain import louvain, louvain_assign, louvain_dendrogram
from graphlouvain.community.models import LouvainOptions
from graphlouvain.community.modularity import modularity
from graphlouvain.graph.errors import (
    EmptyGraphError,
    InvalidGraphError,
    MultiGraphUnsupportedError,
)
from graphlouvain.logging.context import get_context

CLIQUES = [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11]]


def _random_graph(seed: int) -> nx.Graph:
    rng = random.Random(seed)
    n = rng.randint(8, 40)
    g = nx.gnm_random_graph(n, rng.randint(n, 4 * n), seed=seed, directed=rng.random() < 0.5)
    for _, _, data in g.edges(data=True):
        data["weight"] = rng.uniform(0.5, 5.0)
    return g


def _groups(result: dict) -> set[frozenset]:
    groups: dict = {}
    for node, community in result.items():
        groups.setdefault(community, set()).add(node)
    return {frozenset(g) for g in groups.values()}


class TestLouvain:
    def test_clique_ring(self, clique_ring):
        result = louvain(clique_ring)
        assert _groups(result) == {frozenset(c) for c in CLIQUES}
        assert modularity(clique_ring, result) == pytest.approx(0.524, abs=0.01)

    def test_community_ids_are_representative_nodes(self, clique_ring):
        result = louvain(clique_ring)
        assert result == {n: 2 + 4 * (n // 4) for n in range(12)}

    def test_string_node_ids(self):
        g = nx.relabel_nodes(_clique_ring(), str)
        result = louvain(g)
        assert len(set(result.values())) == 3
        assert set(result.values()) <= set(g.nodes)

    def test_weighted(self, weighted_five):
        result = louvain(weighted_five)
        assert _groups(result) == {frozenset({1, 2, 3}), frozenset({4, 5})}
        assert modularity(weighted_five, result) == pytest.approx(0.337, abs=0.01)

    def test_directed(self, directed_five):
        result = louvain(directed_five)
        assert _groups(result) == {frozenset({1, 5}), frozenset({2, 3, 4})}
        assert modularity(directed_five, result) == pytest.approx(0.22, abs=0.01)

    def test_triangle_single_community(self, triangle):
        result = louvain(triangle)
        assert len(set(result.values())) == 1

    def test_mixed_graph(self, mixed_clique_ring):
        result = louvain(mixed_clique_ring)
        assert _groups(result) == {frozenset(c) for c in CLIQUES}

    def test_covers_every_node(self, clique_ring):
        assert set(louvain(clique_ring)) == set(clique_ring.nodes)

    def test_isolated_node_keeps_own_community(self, clique_ring):
        clique_ring.add_node("alone")
        result = louvain(clique_ring)
        assert result["alone"] == "alone"

    def test_does_not_mutate(self, weighted_five):
        before_nodes = dict(weighted_five.nodes(data=True))
        before_edges = nx.to_dict_of_dicts(weighted_five)
        louvain(weighted_five)
        assert dict(weighted_five.nodes(data=True)) == before_nodes
        assert nx.to_dict_of_dicts(weighted_five) == before_edges

    def test_deterministic(self, clique_ring):
        first = louvain(clique_ring)
        second = louvain(clique_ring)
        assert first == second
        assert modularity(clique_ring, first) == modularity(clique_ring, second)

    def test_pruning_option_does_not_change_result(self, clique_ring, weighted_five):
        for graph in (clique_ring, weighted_five):
            assert louvain(graph) == louvain(graph, {"prune_unaltered": False})

    def test_custom_weight_attribute(self):
        g = nx.Graph()
        # heavy "w" links pair up (a, b) and (c, d); "weight" would say otherwise
        g.add_edge("a", "b", w=10, weight=1)
        g.add_edge("b", "c", w=1, weight=10)
        g.add_edge("c", "d", w=10, weight=1)
        result = louvain(g, {"attributes": {"weight": "w"}})
        assert _groups(result) == {frozenset({"a", "b"}), frozenset({"c", "d"})}

    def test_accepts_options_model(self, clique_ring):
        assert louvain(clique_ring, LouvainOptions()) == louvain(clique_ring)

    def test_clears_log_context(self, clique_ring):
        louvain(clique_ring)
        assert get_context().run_id is None
        assert get_context().pass_index is None


class TestLouvainErrors:
    @pytest.mark.parametrize("graph", [None, "graph", 1, [(1, 2)]])
    def test_invalid_graph(self, graph):
        with pytest.raises(InvalidGraphError, match="louvain"):
            louvain(graph)

    def test_multigraph(self):
        g = nx.MultiGraph()
        g.add_edge(1, 2)
        with pytest.raises(MultiGraphUnsupportedError, match="multi"):
            louvain(g)

    def test_no_edges(self, edgeless):
        with pytest.raises(EmptyGraphError):
            louvain(edgeless)

    def test_assign_failure_leaves_graph_untouched(self, edgeless):
        with pytest.raises(EmptyGraphError):
            louvain.assign(edgeless)
        assert all("community" not in data for _, data in edgeless.nodes(data=True))


class TestLouvainAssign:
    def test_default_attribute(self, clique_ring):
        louvain.assign(clique_ring)
        for clique in CLIQUES:
            values = {clique_ring.nodes[n]["community"] for n in clique}
            assert len(values) == 1
        per_clique = {clique_ring.nodes[c[0]]["community"] for c in CLIQUES}
        assert len(per_clique) == 3

    def test_custom_attribute(self, clique_ring):
        louvain.assign(clique_ring, {"attributes": {"community": "foo"}})
        for clique in CLIQUES:
            assert len({clique_ring.nodes[n]["foo"] for n in clique}) == 1
        assert all("community" not in d for _, d in clique_ring.nodes(data=True))

    def test_returns_written_mapping(self, weighted_five):
        result = louvain_assign(weighted_five)
        assert result == {n: d["community"] for n, d in weighted_five.nodes(data=True)}
        assert result == louvain(weighted_five)

    def test_mixed_graph_writes_every_node_once(self, mixed_clique_ring):
        louvain.assign(mixed_clique_ring)
        assert mixed_clique_ring.attribute_writes == 12


class TestLouvainDendrogram:
    def test_levels(self, clique_ring):
        dendrogram = louvain.dendrogram(clique_ring)
        assert dendrogram.levels == 2
        assert dendrogram.final() == louvain(clique_ring)
        assert dendrogram.partition(0) == {n: n for n in clique_ring.nodes}

    def test_community_count_never_grows(self, clique_ring):
        dendrogram = louvain_dendrogram(clique_ring)
        counts = [len(set(dendrogram.partition(level).values())) for level in range(dendrogram.levels)]
        assert counts == sorted(counts, reverse=True)
        assert dendrogram.levels <= clique_ring.number_of_nodes()

    def test_caveman_graph_properties(self):
        g = nx.connected_caveman_graph(4, 5)
        dendrogram = louvain.dendrogram(g)
        counts = [len(set(dendrogram.partition(level).values())) for level in range(dendrogram.levels)]
        assert all(a > b for a, b in zip(counts, counts[1:]))
        result = dendrogram.final()
        assert modularity(g, result) > modularity(g, {n: n for n in g.nodes})


def _clique_ring() -> nx.Graph:
    g = nx.Graph()
    for clique in CLIQUES:
        for i, u in enumerate(clique):
            for v in clique[i + 1:]:
                g.add_edge(u, v)
    g.add_edges_from([(3, 4), (7, 8), (11, 0)])
    return g


class TestPruningEquivalence:
    def test_random_graphs(self):
        mismatches = []
        for seed in range(1500):
            g = _random_graph(seed)
            if louvain(g) != louvain(g, {"prune_unaltered": False}):
                mismatches.append(seed)
        assert mismatches == []
