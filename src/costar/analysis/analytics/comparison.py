# src/costar/analysis/analytics/comparison.py

"""
Comparison of sampled peers against the reference actor.

This module performs:

1. The pure decision `is_better(mean, baseline)`:
      lower mean distance = better connected, ties count as better.

2. Evaluation of the first half of a (shuffled) sample set:
      - profile each node with BFS
      - count peers whose mean is <= baseline
      - count every profiled peer, comparable or not

3. The full run: component → sample set → shuffle → evaluate.

Notification of a "better" peer is an optional callback supplied by the
caller; nothing in here prints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from ..build.graph_store import GraphStore
from .components import find_component
from .distance import DistanceProfile, profile
from .sampling import Sampler

BetterCallback = Callable[[DistanceProfile], None]


@dataclass(frozen=True)
class ResultCounters:
    better_than_reference: int
    total_evaluated: int
    sample_component_size: int

    def as_triple(self) -> Tuple[int, int, int]:
        return (self.better_than_reference, self.total_evaluated, self.sample_component_size)


@dataclass(frozen=True)
class PeerResult:
    node: int
    mean_distance: Optional[float]
    reached: int
    better: bool


@dataclass
class ComparisonRun:
    reference: int
    baseline: float
    component_size: int
    counters: ResultCounters
    peers: List[PeerResult] = field(default_factory=list)
    seed: Optional[int] = None


def is_better(mean: Optional[float], baseline: float) -> bool:
    """True when a computable mean distance is no greater than the baseline."""
    return mean is not None and mean <= baseline


def evaluate_detailed(
    graph: GraphStore,
    sample_set: Sequence[int],
    baseline: float,
    on_better: Optional[BetterCallback] = None,
) -> Tuple[ResultCounters, List[PeerResult]]:
    """
    Profile the evaluation prefix of `sample_set` and keep per-peer rows.

    Parameters
    ----------
    graph : GraphStore
    sample_set : Sequence[int]
        Already shuffled; only the first floor(len/2) entries are profiled.
    baseline : float
        Reference mean distance.
    on_better : callable, optional
        Called with the DistanceProfile of each peer judged better.

    Returns
    -------
    (ResultCounters, List[PeerResult])
    """
    better = 0
    total = 0
    peers: List[PeerResult] = []

    for node in Sampler.evaluation_prefix(list(sample_set)):
        total += 1
        prof = profile(graph, node)
        hit = is_better(prof.mean, baseline)
        if hit:
            better += 1
            if on_better is not None:
                on_better(prof)
        peers.append(PeerResult(node=node, mean_distance=prof.mean, reached=prof.reached, better=hit))

    counters = ResultCounters(
        better_than_reference=better,
        total_evaluated=total,
        sample_component_size=len(sample_set),
    )
    return counters, peers


def evaluate(graph: GraphStore, sample_set: Sequence[int], baseline: float) -> ResultCounters:
    counters, _ = evaluate_detailed(graph, sample_set, baseline)
    return counters


def run_comparison(
    graph: GraphStore,
    reference: int,
    baseline: float,
    sampler: Sampler,
    on_better: Optional[BetterCallback] = None,
) -> ComparisonRun:
    """
    Full pipeline for one reference actor.

    Raises
    ------
    ValueError
        If `reference` is not a node of `graph`.
    """
    if reference not in graph:
        raise ValueError(f"Reference node {reference} is not in the graph (N={graph.size()})")

    component = find_component(graph, reference)
    sample_set = sampler.build_sample_set(component, reference)
    sampler.shuffle(sample_set)

    counters, peers = evaluate_detailed(graph, sample_set, baseline, on_better=on_better)

    return ComparisonRun(
        reference=reference,
        baseline=baseline,
        component_size=len(component),
        counters=counters,
        peers=peers,
        seed=sampler.seed,
    )


def derive_baseline(graph: GraphStore, reference: int) -> Optional[float]:
    """
    The reference actor's own mean distance, computed from `graph`.

    Replaces the configured constant only when explicitly requested.
    """
    if reference not in graph:
        raise ValueError(f"Reference node {reference} is not in the graph (N={graph.size()})")
    return profile(graph, reference).mean
