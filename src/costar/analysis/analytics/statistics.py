# src/costar/analysis/analytics/statistics.py

"""
Statistical validation utilities for the sampled comparison.

This module performs:

1. Proportion of sampled peers at least as well connected as the reference:
      - exact binomial test against an expected proportion (SciPy)
      - Clopper–Pearson confidence interval for that proportion

2. Descriptive statistics of the peers' mean distances:
      - count, mean, median, min, max, standard deviation
      - number of peers with no comparison possible

Gracefully degrades if SciPy is unavailable.
"""

from __future__ import annotations

import statistics as pystats
from typing import Any, Dict, List

from .comparison import PeerResult, ResultCounters

try:
    from scipy import stats
except Exception:
    stats = None


def statistical_validation(
    counters: ResultCounters,
    peers: List[PeerResult],
    expected: float = 0.5,
    confidence: float = 0.95,
) -> Dict[str, Any]:
    """
    Summarize how unusual the reference actor's connectivity is.

    Parameters
    ----------
    counters : ResultCounters
        Output of evaluate().
    peers : List[PeerResult]
        Per-peer rows from evaluate_detailed().
    expected : float
        Null-hypothesis proportion of peers that are "better".
    confidence : float
        Confidence level for the interval.

    Returns
    -------
    Dict[str, Any]
        Contains:
          - proportion {...}
          - peer_distances {...}
    """
    results: Dict[str, Any] = {}

    # ────────────────────────────────────────────────────────────────────────
    # 1. Proportion better (binomial)
    # ────────────────────────────────────────────────────────────────────────
    k = counters.better_than_reference
    n = counters.total_evaluated

    if n == 0:
        results["proportion"] = {"note": "No peers evaluated"}
    else:
        prop: Dict[str, Any] = {"better": k, "evaluated": n, "fraction": k / n}
        if stats is not None:
            try:
                test = stats.binomtest(k, n, p=expected)
                ci = test.proportion_ci(confidence_level=confidence, method="exact")
                prop.update({
                    "expected": expected,
                    "p_value": float(test.pvalue),
                    "ci_low": float(ci.low),
                    "ci_high": float(ci.high),
                    "confidence": confidence,
                })
            except Exception as e:
                prop["note"] = f"Could not run binomial test: {e}"
        else:
            prop["note"] = "SciPy unavailable"
        results["proportion"] = prop

    # ────────────────────────────────────────────────────────────────────────
    # 2. Peer mean distances
    # ────────────────────────────────────────────────────────────────────────
    means = [p.mean_distance for p in peers if p.mean_distance is not None]
    no_comparison = sum(1 for p in peers if p.mean_distance is None)

    if means:
        results["peer_distances"] = {
            "count": len(means),
            "mean": pystats.fmean(means),
            "median": pystats.median(means),
            "min": min(means),
            "max": max(means),
            "stdev": pystats.stdev(means) if len(means) > 1 else 0.0,
            "no_comparison": no_comparison,
        }
    else:
        results["peer_distances"] = {
            "note": "No comparable peers",
            "no_comparison": no_comparison,
        }

    return results
