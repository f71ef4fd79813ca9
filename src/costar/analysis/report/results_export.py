# src/costar/analysis/report/results_export.py

"""
Result export utilities.

This module writes:
  - The three-line counts file (better, evaluated, sample-set size)
  - Per-peer results (node, mean distance, reached, better)

All functions create parent directories before writing.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List

from ..analytics.comparison import PeerResult, ResultCounters


# ---------------------------------------------------------------------------
# Helper: safe writer
# ---------------------------------------------------------------------------
def _write_csv(path: Path, rows: List[Dict[str, Any]], fieldnames: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)
    print(f"[INFO] Saved CSV → {path}")


# ---------------------------------------------------------------------------
# COUNTS
# ---------------------------------------------------------------------------
def write_counts(counters: ResultCounters, path: Path) -> None:
    """
    Write the final counts, one value per line:
      better_than_reference, total_evaluated, sample_component_size
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [str(v) for v in counters.as_triple()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"[INFO] Saved counts → {path}")


# ---------------------------------------------------------------------------
# PEERS
# ---------------------------------------------------------------------------
def export_peers_csv(
    peers: List[PeerResult],
    path: Path,
) -> None:
    """
    Write evaluated peers to CSV: node, mean_distance, reached, better

    Peers with no comparison possible have an empty mean_distance.
    """
    rows = []
    for p in peers:
        rows.append({
            "node": p.node,
            "mean_distance": "" if p.mean_distance is None else f"{p.mean_distance:.6f}",
            "reached": p.reached,
            "better": int(p.better),
        })

    _write_csv(path, rows, ["node", "mean_distance", "reached", "better"])
