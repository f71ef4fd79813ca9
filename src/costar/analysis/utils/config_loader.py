from __future__ import annotations

"""
Config loading utilities for the reference-actor comparison.

This module reads per-graph configuration from:

    data/{graph}/config/reference.ini

and resolves the two injected constants of a run:
    - the reference actor's node ID
    - the reference actor's precomputed mean distance (baseline)

The INI format is intentionally lightweight. Example:

    # reference.ini
    reference_node: 359910
    baseline: 1319167/503944

Precedence: explicit arguments > environment (COSTAR_REFERENCE_NODE,
COSTAR_BASELINE) > reference.ini > built-in defaults.
"""

import os
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from typing import Dict, Optional

DEFAULT_REFERENCE_NODE = 359910
DEFAULT_BASELINE = "1319167/503944"

ENV_REFERENCE_NODE = "COSTAR_REFERENCE_NODE"
ENV_BASELINE = "COSTAR_BASELINE"

KNOWN_KEYS = ("reference_node", "baseline")


@dataclass
class ReferenceConfig:
    """Constants injected into one comparison run."""

    reference_node: int
    baseline: float
    source: str


def parse_baseline(text: str | float | int) -> float:
    """
    Parse a baseline given as "a/b" or a decimal.

    Raises ValueError on unparsable or non-positive values.
    """
    try:
        value = Fraction(str(text).strip())
    except (ValueError, ZeroDivisionError):
        raise ValueError(f"Invalid baseline {text!r}: expected 'a/b' or a decimal") from None
    if value <= 0:
        raise ValueError(f"Baseline must be positive, got {text!r}")
    return float(value)


def parse_reference_node(text: str | int) -> int:
    try:
        node = int(str(text).strip())
    except ValueError:
        raise ValueError(f"Invalid reference node {text!r}: expected an integer") from None
    if node < 0:
        raise ValueError(f"Reference node must be non-negative, got {node}")
    return node


def _parse_reference_ini(path: Path) -> Dict[str, str]:
    """
    Parse reference.ini into a mapping: key -> raw value.
    Lines support comments (#) and must follow:

        key: value
    """
    cfg: Dict[str, str] = {}

    if not path.exists():
        print(f"[INFO] No reference.ini found at {path} – using defaults/environment.")
        return cfg

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if ":" not in line:
            print(f"[WARN] Skipping invalid reference.ini line (missing ':'): {raw}")
            continue

        left, right = line.split(":", 1)
        key = left.strip().lower()
        value = right.strip()

        if key not in KNOWN_KEYS:
            print(f"[WARN] Skipping unknown reference.ini key: {raw}")
            continue
        if not value:
            print(f"[WARN] Skipping reference.ini line with empty value: {raw}")
            continue

        cfg[key] = value

    return cfg


def load_reference_config(
    base_dir: Optional[Path] = None,
    *,
    reference_node: Optional[int | str] = None,
    baseline: Optional[float | str] = None,
) -> ReferenceConfig:
    """
    Resolve the reference node and baseline for a run.

    Parameters
    ----------
    base_dir : Path, optional
        Typically data/{graph-name}; its config/reference.ini is read if present.
    reference_node, baseline : optional
        Explicit overrides (e.g. from CLI flags).
    """
    sources = []

    file_cfg: Dict[str, str] = {}
    if base_dir is not None:
        file_cfg = _parse_reference_ini(base_dir / "config" / "reference.ini")

    # Reference node
    if reference_node is not None:
        node_raw, node_src = reference_node, "argument"
    elif os.getenv(ENV_REFERENCE_NODE):
        node_raw, node_src = os.environ[ENV_REFERENCE_NODE], "environment"
    elif "reference_node" in file_cfg:
        node_raw, node_src = file_cfg["reference_node"], "reference.ini"
    else:
        node_raw, node_src = DEFAULT_REFERENCE_NODE, "default"
    sources.append(f"reference_node={node_src}")

    # Baseline
    if baseline is not None:
        base_raw, base_src = baseline, "argument"
    elif os.getenv(ENV_BASELINE):
        base_raw, base_src = os.environ[ENV_BASELINE], "environment"
    elif "baseline" in file_cfg:
        base_raw, base_src = file_cfg["baseline"], "reference.ini"
    else:
        base_raw, base_src = DEFAULT_BASELINE, "default"
    sources.append(f"baseline={base_src}")

    return ReferenceConfig(
        reference_node=parse_reference_node(node_raw),
        baseline=parse_baseline(base_raw),
        source=", ".join(sources),
    )
