#!/usr/bin/env python3
"""
Reference-Actor Connectivity Analysis
-------------------------------------------------------
Loads a co-star adjacency file, finds the reference actor's connected
component, shuffles the other members and profiles the first half with BFS,
then counts how many sampled peers have a mean shortest-path distance no
greater than the reference baseline. Writes the three-line counts file, a
per-peer CSV and a Markdown report. Configurable via CLI (input path, output
dir, reference node, baseline, random state, validation, memory monitor).
"""

from __future__ import annotations

import argparse
import gc
import time
from typing import Any, Dict

import networkx as nx

from costar.utils.paths import resolve_run_paths

# Optional memory monitoring
try:  # pragma: no cover
    import psutil
except Exception:  # pragma: no cover
    psutil = None

# ──────────────────────────────────────────────────────────────────────────────
# Imports from submodules
# ──────────────────────────────────────────────────────────────────────────────

from .loader.adjacency_loader import load_adjacency
from .build.graph_store import BuildStats, GraphStore

from .analytics.comparison import derive_baseline, run_comparison
from .analytics.components import find_component
from .analytics.connectivity import connectivity_summary
from .analytics.distance import DistanceProfile, profile
from .analytics.sampling import Sampler
from .analytics.statistics import statistical_validation
from .analytics.traversal import cross_check, traversal_preview

from .report.report_basic import render_report
from .report.results_export import export_peers_csv, write_counts
from .utils.config_loader import load_reference_config
from .utils.errors import MalformedInputError


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compare sampled co-stars against a reference actor.")
    p.add_argument(
        "--input",
        help="Path to the adjacency text file. If omitted, defaults to {base}/adj.txt when --graph-name/--data-location is provided.",
    )
    p.add_argument(
        "--graph-name",
        help="Graph name (uses data/{graph-name} as base when --input not given).",
    )
    p.add_argument(
        "--data-location",
        help="Explicit data directory (overrides --graph-name).",
    )
    p.add_argument(
        "--outdir",
        help="Output directory (default: {base}/analysis when graph/data specified, else data/analysis)",
    )
    p.add_argument(
        "--output",
        default="KevinSpecialOrNot.txt",
        help="Filename for the three-line counts file under outdir",
    )
    p.add_argument(
        "--reference-node",
        help="Reference actor ID (overrides environment and reference.ini)",
    )
    p.add_argument(
        "--baseline",
        help="Reference mean distance, as 'a/b' or a decimal (overrides environment and reference.ini)",
    )
    p.add_argument(
        "--derive-baseline",
        action="store_true",
        help="Compute the baseline from the graph instead of using the configured constant",
    )
    p.add_argument(
        "--random-state",
        type=int,
        default=None,
        help="Random seed for the sample permutation (unset = different sample each run)",
    )
    p.add_argument(
        "--memory-monitor",
        action="store_true",
        help="Enable memory usage monitoring and GC logging",
    )
    p.add_argument(
        "--validation",
        action="store_true",
        help="Perform statistical validation and a NetworkX cross-check of the traversals",
    )
    p.add_argument(
        "--announce",
        action="store_true",
        help="Print a line for every sampled peer at least as well connected as the reference",
    )
    return p.parse_args(argv)


# ──────────────────────────────────────────────────────────────────────────────
# Memory utilities
# ──────────────────────────────────────────────────────────────────────────────


def optimize_memory() -> None:
    """Force garbage collection and optionally log process memory usage."""
    gc.collect()
    if psutil is not None:
        proc = psutil.Process()
        mem_mb = proc.memory_info().rss / 1024 / 1024
        print(f"[MEMORY] After GC: {mem_mb:.1f} MB")


def _announce(prof: DistanceProfile) -> None:
    print(f"   Impressive. Actor {prof.start} (mean distance {prof.mean:.4f})")


def _validate(graph: GraphStore, run, reference: int, stats: BuildStats, G: nx.Graph) -> Dict[str, Any]:
    results = statistical_validation(run.counters, run.peers)
    if stats.n_asymmetric:
        print("[WARN] Adjacency is not symmetric; skipping NetworkX cross-check.")
        return results

    component = find_component(graph, reference)
    results["cross_check"] = cross_check(graph, reference, component, profile(graph, reference), G=G)
    return results


# ──────────────────────────────────────────────────────────────────────────────
# Main orchestration
# ──────────────────────────────────────────────────────────────────────────────


def main(argv=None) -> None:
    args = parse_args(argv)
    paths = resolve_run_paths(args.input, args.graph_name, args.data_location, args.outdir)
    input_path, outdir = paths.input_path, paths.outdir

    try:
        cfg = load_reference_config(
            paths.base_dir,
            reference_node=args.reference_node,
            baseline=args.baseline,
        )
    except ValueError as e:
        raise SystemExit(f"❌ Invalid configuration: {e}")

    start_time = time.time()

    print(f"📥 Loading adjacency from {input_path}")
    try:
        graph = load_adjacency(input_path)
    except MalformedInputError as e:
        raise SystemExit(f"❌ Malformed adjacency input: {e}")

    build_stats = graph.build_stats()
    print(
        f"✅ Graph loaded: {build_stats.n_nodes} actors, "
        f"{build_stats.n_edges} edges, {build_stats.n_isolated} without neighbors"
    )
    if build_stats.n_asymmetric:
        print(f"[WARN] {build_stats.n_asymmetric} adjacency listings have no reverse entry.")

    reference = cfg.reference_node
    if reference not in graph:
        raise SystemExit(f"❌ Reference node {reference} is not in the graph (N={graph.size()}).")

    baseline = cfg.baseline
    if args.derive_baseline:
        derived = derive_baseline(graph, reference)
        if derived is None:
            raise SystemExit(f"❌ Reference node {reference} has no reachable peers; cannot derive a baseline.")
        baseline = derived
        print(f"📐 Baseline derived from graph: {baseline:.6f} (differs from configured constant)")
    else:
        print(f"📐 Reference {reference}, baseline {baseline:.6f} ({cfg.source})")

    if args.memory_monitor:
        print("🔍 Memory monitoring enabled")
    if args.validation:
        print("📊 Statistical validation and NetworkX cross-check enabled")

    # Connectivity
    print("🔗 Connectivity analysis …")
    G = graph.to_networkx()
    conn = connectivity_summary(graph, reference=reference, G=G)
    print(
        f"   Components: {conn['n_components']} | "
        f"Giant: {conn['giant_nodes']} ({conn['giant_fraction']:.2%}) | "
        f"Isolates: {conn['n_isolates']}"
    )

    # Comparison
    print("🎲 Sampling the reference component and profiling peers …")
    sampler = Sampler(seed=args.random_state)
    run = run_comparison(
        graph,
        reference,
        baseline,
        sampler,
        on_better=_announce if args.announce else None,
    )
    counters = run.counters
    print(
        f"   Component: {run.component_size} | Sampled: {counters.total_evaluated} "
        f"of {counters.sample_component_size} | Better or equal: {counters.better_than_reference}"
    )

    if args.memory_monitor:
        optimize_memory()

    # Statistical validation
    validation_results: Dict[str, Any] = {}
    if args.validation:
        print("📊 Performing statistical validation …")
        validation_results = _validate(graph, run, reference, build_stats, G)
        print(f"   Validation complete ({len(validation_results)} sections).")

    # Traversal previews
    bfs_txt, dfs_txt = "", ""
    if args.validation:
        bfs_txt, dfs_txt = traversal_preview(graph, [reference], G=G)

    # Outputs
    write_counts(counters, outdir / args.output)
    export_peers_csv(run.peers, outdir / "peers.csv")

    print("📝 Rendering report …")
    report_md = render_report(
        stats=build_stats,
        connectivity=conn,
        run=run,
        validation=validation_results,
        traversal_bfs_text=bfs_txt,
        traversal_dfs_text=dfs_txt,
    )
    report_path = outdir / "report_costar.md"
    report_path.write_text(report_md, encoding="utf-8")
    print(f"📄 Saved report → {report_path}")

    elapsed = time.time() - start_time
    print(f"⏱️ Total execution time: {elapsed:.1f}s")
    print("✔️ Analysis complete.")


if __name__ == "__main__":
    main()
