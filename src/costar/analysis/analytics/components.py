# src/costar/analysis/analytics/components.py

"""
Reachability search for the reference actor's connected component.

Iterative, explicit-stack DFS so that deep or skewed co-star graphs never hit
the interpreter's recursion limit. Purely analytical: no printing, no I/O.
"""

from __future__ import annotations

from typing import List, Set

from ..build.graph_store import GraphStore


def find_component(graph: GraphStore, start: int) -> Set[int]:
    """
    Return every node reachable from `start`, including `start`.

    Nodes are marked visited when pushed, so each is discovered once. The
    current node is pushed back before each newly found neighbor; popping it
    again only re-scans neighbors that are already visited.

    Parameters
    ----------
    graph : GraphStore
    start : int
        Node ID in [0, N).

    Returns
    -------
    Set[int]
    """
    if start not in graph:
        raise IndexError(f"Start node {start} is outside [0, {graph.size()})")

    visited: List[bool] = [False] * graph.size()
    stack: List[int] = [start]
    visited[start] = True

    while stack:
        current = stack.pop()
        for nb in graph.neighbors(current):
            if not visited[nb]:
                stack.append(current)
                stack.append(nb)
                visited[nb] = True

    return {node for node, seen in enumerate(visited) if seen}
