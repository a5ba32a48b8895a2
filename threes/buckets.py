"""Weighted sampling without replacement for the initial board."""

import random
from typing import List, Sequence


class Buckets:
    """
    Per-category counts padded to a desired total.

    ``counts[i]`` is how many times category ``i`` will be drawn. Drawing
    never mutates the instance, so each ``draw()`` is an independent shuffle
    of the same multiset.
    """

    def __init__(self, rng: random.Random, base_counts: Sequence[int], desired_total: int):
        counts = list(base_counts)
        deficit = desired_total - sum(counts)
        if deficit < 0:
            raise ValueError(
                f"Base counts sum to {sum(counts)}, more than the desired total {desired_total}"
            )
        for _ in range(deficit):
            counts[rng.randrange(len(counts))] += 1

        self.counts = counts
        self.desired_total = desired_total

    def draw(self, rng: random.Random) -> List[int]:
        """
        Draw ``desired_total`` category indices.

        Returns:
            List of indices in ``range(len(self.counts))``, each index
            appearing exactly ``counts[index]`` times.
        """
        remaining = list(self.counts)
        drawn = []
        while len(drawn) < self.desired_total:
            index = rng.randrange(len(remaining))
            if remaining[index] > 0:
                drawn.append(index)
                remaining[index] -= 1
        return drawn

    def __len__(self) -> int:
        return len(self.counts)

    def __repr__(self) -> str:
        return f"Buckets(counts={self.counts}, desired_total={self.desired_total})"
