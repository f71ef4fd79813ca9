"""
Path resolution for co-star analysis runs.

A run is located by either:
  - --input (an adjacency file anywhere on disk), or
  - --graph-name (data/{graph-name}/adj.txt) / --data-location ({dir}/adj.txt)

Outputs go to --outdir, else {base}/analysis, else data/analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ADJACENCY_FILENAME = "adj.txt"


@dataclass
class RunPaths:
    input_path: Path
    outdir: Path
    base_dir: Optional[Path] = None


def resolve_base_dir(graph_name: Optional[str], data_location: Optional[str], *, create: bool = False) -> Optional[Path]:
    """
    Base directory from data_location (preferred) or data/{graph_name}.

    Returns None when neither is given.
    """
    if data_location:
        base = Path(data_location)
    elif graph_name:
        base = Path("data") / graph_name
    else:
        return None

    if create:
        base.mkdir(parents=True, exist_ok=True)
    return base.resolve()


def resolve_run_paths(
    input_path: Optional[str],
    graph_name: Optional[str] = None,
    data_location: Optional[str] = None,
    outdir: Optional[str] = None,
) -> RunPaths:
    """
    Work out where to read adjacency from and where to write results.

    Raises:
        SystemExit if no input can be located.
    """
    base_dir = resolve_base_dir(graph_name, data_location, create=True)

    if input_path:
        adj = Path(input_path)
    elif base_dir is None:
        raise SystemExit("Please provide --input or --graph-name/--data-location to locate the adjacency file.")
    else:
        adj = base_dir / ADJACENCY_FILENAME
        if not adj.exists():
            raise SystemExit(f"Could not find {ADJACENCY_FILENAME} in {base_dir}.")

    if outdir:
        out = Path(outdir)
    elif base_dir is not None:
        out = base_dir / "analysis"
    else:
        out = Path("data") / "analysis"
    out.mkdir(parents=True, exist_ok=True)

    return RunPaths(input_path=adj, outdir=out, base_dir=base_dir)
