"""
Game state: board, pending tile and one step of undo.
"""

import logging
import random
from typing import Sequence, Tuple

from threes.direction import Direction
from threes.grid import Grid
from threes.tile import Tile

logger = logging.getLogger(__name__)


class State:
    """
    Orchestrates Grid and Tile.

    Only the state before the latest ``shift`` is retained; ``shift_back``
    restores it.
    """

    def __init__(self, grid: Grid, tile: Tile):
        self.grid = grid
        self.tile = tile
        self.game_over = False
        self._snapshot: Tuple[Grid, Tile, bool] = (grid.copy(), tile.copy(), False)

    @classmethod
    def from_base_values(cls, rng: random.Random, base_counts: Sequence[int]) -> 'State':
        """
        Create a fresh game.

        Args:
            rng: Random source
            base_counts: Per-value minimum cell counts, summing to at most 16
        """
        grid = Grid.rand(rng, base_counts)
        tile = Tile.new(rng, grid.series)
        return cls(grid, tile)

    @property
    def next_tile(self) -> int:
        return self.tile.current()

    def shift(self, rng: random.Random, direction: Direction) -> 'State':
        self._snapshot = (self.grid.copy(), self.tile.copy(), self.game_over)

        result = self.grid.shift(rng, direction, self.tile.current())
        self.grid = result.grid
        self.game_over = result.game_over
        if result.tile_placed:
            self.tile.next(rng, self.grid.max())
        elif result.game_over:
            logger.debug("No move left after %s (score %d)", direction.name, self.score())
        return self

    def shift_back(self) -> 'State':
        grid, tile, game_over = self._snapshot
        self.grid = grid.copy()
        self.tile = tile.copy()
        self.game_over = game_over
        logger.debug("Restored previous state")
        return self

    def score(self) -> int:
        return self.grid.score()

    def __repr__(self) -> str:
        return f"State(score={self.score()}, next_tile={self.next_tile}, game_over={self.game_over})"
