# src/costar/analysis/analytics/sampling.py

"""
Random sampling of the reference actor's component.

The permutation swaps position i with a position drawn from the FULL range
[0, n) for i in 0..n-2. This is not the textbook Fisher–Yates (which draws
from [i, n)); do not change the draw bound.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional


class Sampler:
    """Owns the random generator used for one run; seed it for reproducibility."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    @staticmethod
    def build_sample_set(all_members: Iterable[int], reference: int) -> List[int]:
        """All component members except `reference`, in ascending ID order."""
        return sorted(n for n in all_members if n != reference)

    def shuffle(self, sequence: List[int]) -> None:
        """Permute `sequence` in place."""
        n = len(sequence)
        for i in range(n - 1):
            j = self.rng.randrange(n)
            sequence[i], sequence[j] = sequence[j], sequence[i]

    @staticmethod
    def evaluation_prefix(sequence: List[int]) -> List[int]:
        return sequence[: len(sequence) // 2]
