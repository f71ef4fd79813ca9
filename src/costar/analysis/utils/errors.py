# src/costar/analysis/utils/errors.py

"""
Error types shared by the loader and the graph store.
"""


class MalformedInputError(ValueError):
    """Adjacency input is structurally invalid; no partial graph is usable."""
