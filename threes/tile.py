"""Pending next tile."""

import random
from typing import Optional

from threes.config import TILE_P
from threes.distribution import Distribution
from threes.series import Series


class Tile:
    """
    The value that will enter the board on the next productive move.

    New values favour the seeds; larger values show up with exponentially
    decaying probability, never above the board's current maximum.
    """

    def __init__(self, value: int, series: Optional[Series] = None,
                 distribution: Optional[Distribution] = None):
        self.value = value
        self.series = series or Series.default()
        self.distribution = distribution or Distribution(TILE_P)

    @classmethod
    def new(cls, rng: random.Random, series: Optional[Series] = None,
            distribution: Optional[Distribution] = None) -> 'Tile':
        """Tile holding one of the two seed values, uniformly."""
        series = series or Series.default()
        return cls(series.u_n(rng.randrange(2)), series, distribution)

    def current(self) -> int:
        return self.value

    def next(self, rng: random.Random, grid_max: int) -> int:
        """Replace the pending value and return it."""
        self.value = self.series.u_n(self.rank(rng, grid_max))
        return self.value

    def rank(self, rng: random.Random, grid_max: int) -> int:
        max_rank = self.series.n(grid_max)
        if max_rank <= 1:
            return rng.randrange(2)
        # The distribution is 1-based, ranks are 0-based
        return min(self.distribution.sample(rng) - 1, max_rank)

    def copy(self) -> 'Tile':
        return Tile(self.value, self.series, self.distribution)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.value, self.series, self.distribution) == (other.value, other.series, other.distribution)

    def __repr__(self) -> str:
        return f"Tile({self.value})"
