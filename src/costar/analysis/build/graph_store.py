# src/costar/analysis/build/graph_store.py

"""
Graph storage for the co-star analysis.

This module is responsible ONLY for:
  - holding the dense-ID adjacency rows loaded from input
  - validating row count and neighbor bounds at construction
  - answering neighbor / size lookups
  - returning basic build statistics

It deliberately does NOT traverse the graph; components and distances live
in the analytics package. Bounds are checked once here so the traversals can
index rows directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import networkx as nx

from ..utils.errors import MalformedInputError


@dataclass
class BuildStats:
    n_nodes: int
    n_edges: int
    n_isolated: int
    n_asymmetric: int


class GraphStore:
    """
    Immutable adjacency structure keyed by dense integer IDs in [0, N).

    Each row keeps the neighbor order it was loaded with.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Iterable[int]]) -> None:
        """
        Freeze rows and check every neighbor ID lies in [0, len(rows)).

        Raises
        ------
        MalformedInputError
            If a neighbor ID is out of range.
        """
        frozen = tuple(tuple(r) for r in rows)
        n = len(frozen)
        for node, row in enumerate(frozen):
            for nb in row:
                if not 0 <= nb < n:
                    raise MalformedInputError(
                        f"Neighbor ID {nb} of node {node} is outside [0, {n})"
                    )
        self._rows: Tuple[Tuple[int, ...], ...] = frozen

    @classmethod
    def from_rows(cls, actor_count: int, rows: Iterable[Iterable[int]]) -> "GraphStore":
        """
        Check the declared actor count, then build the store.

        Raises
        ------
        MalformedInputError
            If the number of rows differs from `actor_count`, or a neighbor
            ID falls outside [0, actor_count).
        """
        rows = list(rows)
        if actor_count < 0:
            raise MalformedInputError(f"Actor count must be non-negative, got {actor_count}")
        if len(rows) != actor_count:
            raise MalformedInputError(
                f"Declared actor count {actor_count} does not match {len(rows)} adjacency rows"
            )

        return cls(rows)

    def neighbors(self, node: int) -> Tuple[int, ...]:
        return self._rows[node]

    def size(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._rows)

    def build_stats(self) -> BuildStats:
        """
        Count nodes, undirected edges, isolated nodes and one-sided listings.

        An adjacency "u v" without the matching "v u" is counted once in
        n_asymmetric; traversals follow rows exactly as listed.
        """
        listed = {(u, v) for u, row in enumerate(self._rows) for v in row}

        edges = set()
        asymmetric = 0
        isolated = 0
        for u, row in enumerate(self._rows):
            if not row:
                isolated += 1
            for v in row:
                edges.add((min(u, v), max(u, v)))
                if (v, u) not in listed:
                    asymmetric += 1

        return BuildStats(
            n_nodes=len(self._rows),
            n_edges=len(edges),
            n_isolated=isolated,
            n_asymmetric=asymmetric,
        )

    def to_networkx(self) -> nx.Graph:
        """
        Build an undirected NetworkX view with nodes 0..N-1.

        Used for summaries and cross-checks only.
        """
        G = nx.Graph()
        G.add_nodes_from(range(len(self._rows)))
        for u, row in enumerate(self._rows):
            for v in row:
                G.add_edge(u, v)
        return G

    def __repr__(self) -> str:
        return f"GraphStore(n_nodes={len(self._rows)})"


def empty_rows(actor_count: int) -> List[List[int]]:
    """Pre-initialized rows so unlisted IDs have an empty neighbor list."""
    return [[] for _ in range(actor_count)]
