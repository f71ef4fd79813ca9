# src/costar/analysis/analytics/distance.py

"""
Single-source shortest-path distances over the unweighted co-star graph.

This module implements:
  - an explicit-queue BFS producing a fresh distance map per call
  - the mean distance over every node reached at a positive hop count

A start node with no reachable peers has no mean (None); callers treat that
as "no comparison possible" rather than an error.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Optional

from ..build.graph_store import GraphStore

UNREACHED = -1


@dataclass(frozen=True)
class DistanceProfile:
    start: int
    distances: List[int]
    mean: Optional[float]
    reached: int
    distance_sum: int

    @property
    def comparable(self) -> bool:
        return self.mean is not None


def bfs_distances(graph: GraphStore, start: int) -> List[int]:
    """
    Hop counts from `start` to every node, UNREACHED where no path exists.
    """
    if start not in graph:
        raise IndexError(f"Start node {start} is outside [0, {graph.size()})")

    visited: List[bool] = [False] * graph.size()
    dist: List[int] = [UNREACHED] * graph.size()

    visited[start] = True
    dist[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for nb in graph.neighbors(current):
            if not visited[nb]:
                visited[nb] = True
                dist[nb] = dist[current] + 1
                queue.append(nb)

    return dist


def profile(graph: GraphStore, start: int) -> DistanceProfile:
    """
    Run BFS from `start` and summarize the distances.

    Parameters
    ----------
    graph : GraphStore
    start : int

    Returns
    -------
    DistanceProfile
        `mean` is sum/count over distances > 0, or None when that set is empty.
    """
    dist = bfs_distances(graph, start)

    total = 0
    count = 0
    for d in dist:
        if d > 0:
            total += d
            count += 1

    mean = total / count if count else None

    return DistanceProfile(
        start=start,
        distances=dist,
        mean=mean,
        reached=count,
        distance_sum=total,
    )
