"""Tests for conversions between Graph and networkx graphs."""

import networkx as nx
import pytest

from disjoint_graph.algorithms.graph import Edge, Graph
from disjoint_graph.utils.nx_convert import from_networkx, to_networkx


def sample_graph():
    graph = Graph()
    for v in [1, 2, 3, 4]:
        graph.add_vertex(v)
    graph.add_edge(1, 2, 5)
    graph.add_edge(2, 3, 7)
    return graph


class TestToNetworkx:
    def test_undirected(self):
        G = to_networkx(sample_graph())
        assert not G.is_directed()
        assert set(G.nodes) == {1, 2, 3, 4}
        assert G[2][1]["weight"] == 5
        assert G.number_of_edges() == 2

    def test_directed(self):
        G = to_networkx(sample_graph(), directed=True)
        assert G.is_directed()
        assert G.has_edge(1, 2)
        assert not G.has_edge(2, 1)


class TestFromNetworkx:
    def test_weights_and_default(self):
        G = nx.Graph()
        G.add_edge("a", "b", weight=4)
        G.add_edge("b", "c")
        G.add_node("d")
        graph = from_networkx(G, default_weight=2)
        assert graph.get_vertices() == frozenset("abcd")
        assert graph.get_sum_of_weights() == 6
        assert Edge("b", "a", 4) in graph.get_neighbors("b")

    def test_directed_source(self):
        G = nx.DiGraph()
        G.add_edge(1, 2, weight=3)
        graph = from_networkx(G)
        assert graph.get_neighbors(1) == (Edge(1, 2, 3),)
        assert graph.get_neighbors(2) == ()

    def test_fractional_weight_rejected(self):
        G = nx.Graph()
        G.add_edge("a", "b", weight=2.5)
        with pytest.raises(ValueError):
            from_networkx(G)

    def test_fractional_default_weight_rejected(self):
        G = nx.Graph()
        G.add_edge("a", "b")
        with pytest.raises(ValueError):
            from_networkx(G, default_weight=0.5)
