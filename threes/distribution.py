"""Geometric distribution sampler."""

import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Distribution:
    """
    Geometric distribution over k >= 1 with success probability ``p``.

    Valid for 0 < p <= 1. The tail is unbounded; callers clamp.
    """
    p: float

    def sample(self, rng: random.Random) -> int:
        if self.p >= 1.0:
            return 1
        # random() is in [0, 1), flip it to (0, 1]
        x = 1.0 - rng.random()
        k = math.ceil(math.log(x) / math.log(1.0 - self.p))
        return max(1, k)
