# src/costar/analysis/analytics/connectivity.py

"""
Connectivity analysis utilities.

This module provides tools for:
  - counting connected components
  - sizing the giant component
  - listing isolated actors

Computed on a NetworkX view of the GraphStore. Purely analytical: no
visualization, no CLI, no file I/O.
"""

from __future__ import annotations

from typing import Any, Dict

import networkx as nx

from ..build.graph_store import GraphStore


def connectivity_summary(
    graph: GraphStore,
    reference: int | None = None,
    G: nx.Graph | None = None,
) -> Dict[str, Any]:
    """
    Compute high-level connectivity statistics for the graph.

    Parameters
    ----------
    graph : GraphStore
    reference : int, optional
        If given, also report whether it sits in the giant component.
    G : nx.Graph, optional
        Existing NetworkX view of `graph`; built when omitted.

    Returns
    -------
    Dict[str, Any]
        {
            "n_components"   : int,
            "giant_nodes"    : int,
            "giant_fraction" : float,
            "n_isolates"     : int,
            "isolates"       : List[int],
            "reference_in_giant" : bool | None
        }
    """
    if graph.size() == 0:
        return {
            "n_components": 0,
            "giant_nodes": 0,
            "giant_fraction": 0.0,
            "n_isolates": 0,
            "isolates": [],
            "reference_in_giant": None,
        }

    if G is None:
        G = graph.to_networkx()
    comps = sorted(nx.connected_components(G), key=len, reverse=True)
    giant = comps[0]

    isolates = sorted(nx.isolates(G))

    in_giant = None
    if reference is not None and reference in graph:
        in_giant = reference in giant

    return {
        "n_components": len(comps),
        "giant_nodes": len(giant),
        "giant_fraction": len(giant) / G.number_of_nodes(),
        "n_isolates": len(isolates),
        "isolates": isolates[:50],   # preview only
        "reference_in_giant": in_giant,
    }
