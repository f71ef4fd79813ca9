import pytest

from costar.analysis.analytics.components import find_component
from costar.analysis.build.graph_store import GraphStore


def test_example_component(example_graph):
    assert find_component(example_graph, 2) == {0, 1, 2}
    assert find_component(example_graph, 3) == {3, 4}


def test_isolated_start():
    g = GraphStore.from_rows(3, [[], [2], [1]])
    assert find_component(g, 0) == {0}


def test_component_contains_start_and_is_closed(random_graph):
    for start in range(random_graph.size()):
        comp = find_component(random_graph, start)
        assert start in comp
        for u in comp:
            for v in random_graph.neighbors(u):
                assert v in comp


def test_repeated_calls_identical(random_graph):
    assert find_component(random_graph, 5) == find_component(random_graph, 5)


def test_self_loops_and_cycles_terminate():
    g = GraphStore.from_rows(3, [[0, 1], [2, 0], [0, 1, 2]])
    assert find_component(g, 0) == {0, 1, 2}


def test_deep_chain_does_not_recurse():
    n = 20000
    rows = [[i + 1] if i + 1 < n else [] for i in range(n)]
    g = GraphStore.from_rows(n, rows)
    assert len(find_component(g, 0)) == n


def test_start_out_of_range(example_graph):
    with pytest.raises(IndexError):
        find_component(example_graph, 5)
