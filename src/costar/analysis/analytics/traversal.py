# src/costar/analysis/analytics/traversal.py

"""
Traversal utilities backed by NetworkX.

This module implements:
  - BFS preview (depth-limited)
  - DFS preorder preview
  - A cross-check of the hand-written component search and BFS distances
    against NetworkX's own algorithms

All routines are pure and return plain data or human-readable strings for
the Markdown report.
"""

from __future__ import annotations

from itertools import islice
from typing import Dict, Iterable, List, Optional, Set, Tuple

import networkx as nx

from ..build.graph_store import GraphStore
from .distance import UNREACHED, DistanceProfile


def traversal_preview(
    graph: GraphStore,
    seeds: Iterable[int],
    limit: int = 20,
    depth_limit: int = 3,
    G: Optional[nx.Graph] = None,
) -> Tuple[str, str]:
    """
    Produce BFS and DFS textual previews for each seed.

    Parameters
    ----------
    graph : GraphStore
    seeds : Iterable[int]
        Node IDs; IDs outside the graph are reported as missing.
    limit : int
        Maximum nodes listed per seed.
    G : nx.Graph, optional
        Existing NetworkX view of `graph`; built when omitted.

    Returns
    -------
    (bfs_text, dfs_text) : Tuple[str, str]
    """
    if G is None:
        G = graph.to_networkx()
    bfs_lines: List[str] = []
    dfs_lines: List[str] = []

    for s in seeds:
        if s not in graph:
            bfs_lines.append(f"[seed missing] {s}")
            dfs_lines.append(f"[seed missing] {s}")
            continue

        # ---- BFS (depth-limited) ----
        bfs_edges = nx.bfs_edges(G, source=s, depth_limit=depth_limit)
        bfs_nodes = [s] + [v for _, v in islice(bfs_edges, max(limit - 1, 0))]
        bfs_lines.append(f"Seed: {s}\n  " + " → ".join(str(n) for n in bfs_nodes))

        # ---- DFS preorder ----
        dfs_nodes = list(islice(nx.dfs_preorder_nodes(G, source=s), limit))
        dfs_lines.append(f"Seed: {s}\n  " + " → ".join(str(n) for n in dfs_nodes))

    return "\n\n".join(bfs_lines), "\n\n".join(dfs_lines)


def cross_check(
    graph: GraphStore,
    start: int,
    component: Set[int],
    prof: DistanceProfile,
    G: Optional[nx.Graph] = None,
) -> Dict[str, bool]:
    """
    Compare traversal results with NetworkX on the undirected view.

    Only meaningful when every adjacency is listed in both directions; for
    one-sided input the NetworkX view has extra edges and mismatches are
    expected.

    Returns
    -------
    Dict[str, bool]
        {"component_matches": bool, "distances_match": bool}
    """
    if G is None:
        G = graph.to_networkx()

    nx_component = nx.node_connected_component(G, start)

    nx_lengths = nx.single_source_shortest_path_length(G, prof.start)
    expected = [nx_lengths.get(n, UNREACHED) for n in range(graph.size())]

    return {
        "component_matches": set(nx_component) == set(component),
        "distances_match": expected == list(prof.distances),
    }
