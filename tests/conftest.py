import random
import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
for p in (ROOT, ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

import pytest

from costar.analysis.build.graph_store import GraphStore


def graph_from_edges(n, edges):
    """Symmetric GraphStore from an undirected edge list."""
    rows = [[] for _ in range(n)]
    for u, v in edges:
        rows[u].append(v)
        rows[v].append(u)
    return GraphStore.from_rows(n, rows)


class FixedRng:
    """Stand-in generator returning scripted indices and recording bounds."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.bounds = []

    def randrange(self, n):
        self.bounds.append(n)
        return self.draws.pop(0)


@pytest.fixture
def example_graph():
    """N=5 with edges 0-2, 1-2, 3-4."""
    return graph_from_edges(5, [(0, 2), (1, 2), (3, 4)])


@pytest.fixture
def path_graph():
    """0-1-2-3-4"""
    return graph_from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])


@pytest.fixture
def random_graph():
    rng = random.Random(7)
    n = 60
    edges = set()
    while len(edges) < 80:
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.add((min(u, v), max(u, v)))
    return graph_from_edges(n, sorted(edges))


EXAMPLE_TEXT = "5\n0\t2\n1\t2\n2\t0\t1\n3\t4\n4\t3\n"


@pytest.fixture
def example_adj(tmp_path):
    path = tmp_path / "adj.txt"
    path.write_text(EXAMPLE_TEXT, encoding="utf-8")
    return path
