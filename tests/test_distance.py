import pytest

from costar.analysis.analytics.distance import UNREACHED, bfs_distances, profile
from costar.analysis.build.graph_store import GraphStore


def test_example_profile_from_node_0(example_graph):
    prof = profile(example_graph, 0)
    assert prof.distances == [0, 2, 1, UNREACHED, UNREACHED]
    assert prof.reached == 2
    assert prof.distance_sum == 3
    assert prof.mean == pytest.approx(1.5)
    assert prof.comparable


def test_isolated_node_has_no_mean():
    g = GraphStore.from_rows(2, [[], []])
    prof = profile(g, 0)
    assert prof.mean is None
    assert not prof.comparable
    assert prof.distances == [0, UNREACHED]


def test_bfs_optimality(random_graph):
    for start in range(0, random_graph.size(), 7):
        dist = bfs_distances(random_graph, start)
        assert dist[start] == 0
        for v, d in enumerate(dist):
            if v == start:
                continue
            assert d == UNREACHED or d > 0
            if d > 0:
                assert any(dist[u] == d - 1 for u in random_graph.neighbors(v))
                assert all(dist[u] == UNREACHED or dist[u] >= d - 1 for u in random_graph.neighbors(v))


def test_fresh_state_per_call(example_graph):
    first = profile(example_graph, 3)
    second = profile(example_graph, 0)
    again = profile(example_graph, 3)
    assert first == again
    assert second.distances[3] == UNREACHED


def test_path_means(path_graph):
    assert profile(path_graph, 0).mean == pytest.approx(2.5)
    assert profile(path_graph, 2).mean == pytest.approx(1.5)


def test_start_out_of_range(example_graph):
    with pytest.raises(IndexError):
        profile(example_graph, -1)
