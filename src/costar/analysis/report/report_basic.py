# src/costar/analysis/report/report_basic.py

"""
Basic Markdown report generation.

This module produces the run summary:
  - Graph size stats
  - Connectivity summary
  - Reference actor and baseline
  - Comparison counts
  - Statistical validation (when run)
  - Traversal previews (BFS, DFS) from the reference actor

The output is a Markdown-formatted string.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..analytics.comparison import ComparisonRun
from ..build.graph_store import BuildStats


def render_report(
    stats: BuildStats,
    connectivity: Dict[str, Any],
    run: ComparisonRun,
    validation: Optional[Dict[str, Any]] = None,
    traversal_bfs_text: str = "",
    traversal_dfs_text: str = "",
    title: str = "Co-star Connectivity Summary",
) -> str:
    """
    Produce a basic Markdown report.

    Parameters
    ----------
    stats : BuildStats
        Output of GraphStore.build_stats()
    connectivity : Dict[str, Any]
        Output of connectivity_summary()
    run : ComparisonRun
        Output of run_comparison()
    validation : Dict[str, Any], optional
        Output of statistical_validation(), plus an optional "cross_check" key
    traversal_bfs_text, traversal_dfs_text : str
        Multi-line previews from traversal_preview()
    title : str
        Report title

    Returns
    -------
    md : str
        Markdown-formatted report
    """
    counters = run.counters

    md = f"# {title}\n\n"

    # ---------------------------------------------------------------------
    # Graph build statistics
    # ---------------------------------------------------------------------
    md += "## Graph Statistics\n"
    md += f"- **Actors**: {stats.n_nodes}\n"
    md += f"- **Co-appearance edges**: {stats.n_edges}\n"
    md += f"- **Actors without neighbors**: {stats.n_isolated}\n"
    if stats.n_asymmetric:
        md += f"- One-sided adjacency listings: {stats.n_asymmetric}\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Connectivity
    # ---------------------------------------------------------------------
    md += "## Connectivity\n"
    md += f"- Connected components: **{connectivity['n_components']}**\n"
    md += f"- Giant component nodes: **{connectivity['giant_nodes']}**\n"
    md += f"- Fraction in giant component: **{connectivity['giant_fraction']:.3f}**\n"
    md += f"- Isolates: {connectivity['n_isolates']}\n"
    if connectivity.get("reference_in_giant") is not None:
        md += f"- Reference in giant component: {connectivity['reference_in_giant']}\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------------------
    md += "## Comparison\n"
    md += f"- Reference actor: **{run.reference}**\n"
    md += f"- Baseline mean distance: **{run.baseline:.6f}**\n"
    md += f"- Reference component size: {run.component_size}\n"
    md += f"- Sample set (excluding reference): {counters.sample_component_size}\n"
    md += f"- Peers evaluated: **{counters.total_evaluated}**\n"
    md += f"- Peers at least as well connected: **{counters.better_than_reference}**\n"
    if run.seed is not None:
        md += f"- Random seed: {run.seed}\n"
    else:
        md += "- Random seed: unset (sample differs between runs)\n"
    md += "\n"

    # ---------------------------------------------------------------------
    # Statistical validation
    # ---------------------------------------------------------------------
    if validation:
        md += "## Statistical Validation\n"
        prop = validation.get("proportion", {})
        if "fraction" in prop:
            md += f"- Fraction better: **{prop['fraction']:.4f}**\n"
        if "p_value" in prop:
            md += (
                f"- Binomial test vs p={prop['expected']}: p-value {prop['p_value']:.4g}\n"
                f"- {prop['confidence']:.0%} CI: [{prop['ci_low']:.4f}, {prop['ci_high']:.4f}]\n"
            )
        if "note" in prop:
            md += f"- Note: {prop['note']}\n"

        dists = validation.get("peer_distances", {})
        if "mean" in dists:
            md += (
                f"- Peer mean distance: mean {dists['mean']:.4f}, "
                f"median {dists['median']:.4f}, range [{dists['min']:.4f}, {dists['max']:.4f}]\n"
            )
        if dists.get("no_comparison"):
            md += f"- Peers with no comparison possible: {dists['no_comparison']}\n"

        checks = validation.get("cross_check")
        if checks:
            md += "- NetworkX cross-check: "
            md += ", ".join(f"{k}={v}" for k, v in checks.items()) + "\n"
        md += "\n"

    # ---------------------------------------------------------------------
    # Traversal previews (BFS / DFS)
    # ---------------------------------------------------------------------
    if traversal_bfs_text:
        md += "## BFS Traversal (Depth ≤ 3)\n"
        md += "```\n" + traversal_bfs_text.strip() + "\n```\n\n"

    if traversal_dfs_text:
        md += "## DFS Traversal (Preorder)\n"
        md += "```\n" + traversal_dfs_text.strip() + "\n```\n\n"

    return md
