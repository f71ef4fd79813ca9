# src/costar/analysis/loader/adjacency_loader.py

"""
Adjacency loading utilities.

Input format (whitespace-separated, tabs or spaces):

    5
    0   2
    1   2
    2   0   1
    3   4
    4   3

The first non-blank line is the actor count N. Every following line holds a
node ID and then that node's neighbor IDs. IDs never listed as a primary ID
get an empty neighbor list.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..build.graph_store import GraphStore, empty_rows
from ..utils.errors import MalformedInputError


def _parse_int(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedInputError(f"Line {lineno}: expected an integer, got {token!r}") from None


def parse_adjacency(lines: Iterable[str]) -> GraphStore:
    """
    Parse adjacency lines into a validated GraphStore.

    Raises
    ------
    MalformedInputError
        On a missing or invalid actor count, unparsable tokens, primary IDs
        outside [0, N), duplicate primary IDs, or out-of-range neighbors.
    """
    actor_count = None
    rows: List[List[int]] = []
    seen = set()

    for lineno, raw in enumerate(lines, start=1):
        parts = raw.split()
        if not parts:
            continue

        if actor_count is None:
            if len(parts) != 1:
                raise MalformedInputError(f"Line {lineno}: first line must hold only the actor count")
            actor_count = _parse_int(parts[0], lineno)
            if actor_count < 0:
                raise MalformedInputError(f"Line {lineno}: actor count must be non-negative")
            rows = empty_rows(actor_count)
            continue

        node = _parse_int(parts[0], lineno)
        if not 0 <= node < actor_count:
            raise MalformedInputError(
                f"Line {lineno}: node ID {node} exceeds declared actor count {actor_count}"
            )
        if node in seen:
            raise MalformedInputError(f"Line {lineno}: duplicate adjacency row for node {node}")
        seen.add(node)

        rows[node] = [_parse_int(tok, lineno) for tok in parts[1:]]

    if actor_count is None:
        raise MalformedInputError("Adjacency input is empty (missing actor count)")

    return GraphStore.from_rows(actor_count, rows)


def load_adjacency(input_path: str | Path) -> GraphStore:
    """
    Unified entry point.

    Parameters
    ----------
    input_path : str | Path
        Path to an adjacency text file.

    Returns
    -------
    GraphStore
    """
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_adjacency(f)
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{path}: not valid UTF-8 text ({e})") from None
