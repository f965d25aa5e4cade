import pytest

from graph import Graph


def make_graph(n, edges):
    g = Graph(n)
    for u, v in edges:
        g.add_edge(u, v)
    return g


@pytest.fixture
def cycle_graph():
    """0 -> 1 -> 2 -> 0"""
    return make_graph(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def sink_graph():
    """0->1, 1->2, 2->0, 2->3；节点 3 没有出边"""
    return make_graph(4, [(0, 1), (1, 2), (2, 0), (2, 3)])


@pytest.fixture
def isolated_graph():
    return make_graph(2, [])


@pytest.fixture
def single_graph():
    return make_graph(1, [])


@pytest.fixture
def build_graph():
    return make_graph
