import pytest

from costar.analysis.analytics.components import find_component
from costar.analysis.analytics.connectivity import connectivity_summary
from costar.analysis.analytics.distance import profile
from costar.analysis.analytics.traversal import cross_check, traversal_preview
from costar.analysis.build.graph_store import GraphStore


def test_connectivity_summary(example_graph):
    conn = connectivity_summary(example_graph, reference=2)
    assert conn["n_components"] == 2
    assert conn["giant_nodes"] == 3
    assert conn["giant_fraction"] == pytest.approx(0.6)
    assert conn["n_isolates"] == 0
    assert conn["reference_in_giant"] is True


def test_connectivity_summary_isolates():
    g = GraphStore.from_rows(3, [[1], [0], []])
    conn = connectivity_summary(g, reference=2)
    assert conn["isolates"] == [2]
    assert conn["reference_in_giant"] is False


def test_connectivity_summary_empty():
    conn = connectivity_summary(GraphStore.from_rows(0, []))
    assert conn["n_components"] == 0
    assert conn["reference_in_giant"] is None


def test_traversal_preview(example_graph):
    bfs_txt, dfs_txt = traversal_preview(example_graph, [2, 42])
    assert bfs_txt.startswith("Seed: 2\n  2 → ")
    assert "[seed missing] 42" in bfs_txt
    assert "[seed missing] 42" in dfs_txt
    assert "3" not in bfs_txt.split("\n\n")[0].split("\n")[1]


def test_cross_check_agrees_with_networkx(random_graph):
    for start in (0, 13, 42):
        comp = find_component(random_graph, start)
        checks = cross_check(random_graph, start, comp, profile(random_graph, start))
        assert checks == {"component_matches": True, "distances_match": True}


def test_cross_check_flags_mismatch(example_graph):
    checks = cross_check(example_graph, 2, {2}, profile(example_graph, 2))
    assert checks["component_matches"] is False
    assert checks["distances_match"] is True


def test_preview_respects_limit_on_long_chain():
    n = 500
    rows = [[i - 1, i + 1] for i in range(n)]
    rows[0] = [1]
    rows[-1] = [n - 2]
    g = GraphStore.from_rows(n, rows)
    bfs_txt, dfs_txt = traversal_preview(g, [0], limit=5, depth_limit=100)
    assert bfs_txt == "Seed: 0\n  0 → 1 → 2 → 3 → 4"
    assert dfs_txt == "Seed: 0\n  0 → 1 → 2 → 3 → 4"


def test_existing_networkx_view_is_reused(example_graph):
    G = example_graph.to_networkx()
    conn = connectivity_summary(example_graph, reference=2, G=G)
    bfs_txt, _ = traversal_preview(example_graph, [3], G=G)
    comp = find_component(example_graph, 2)
    checks = cross_check(example_graph, 2, comp, profile(example_graph, 2), G=G)
    assert conn["giant_nodes"] == 3
    assert bfs_txt == "Seed: 3\n  3 → 4"
    assert checks == {"component_matches": True, "distances_match": True}
