"""
Threes Game Environment

Step-based wrapper around State with a deterministic, seedable RNG, for
scripted play and policy evaluation. The engine itself never owns a random
source; this wrapper is the caller that does.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from threes.config import DEFAULT_BASE_COUNTS
from threes.direction import Direction
from threes.state import State

logger = logging.getLogger(__name__)


class Game:
    """
    Threes game environment with deterministic, seedable RNG.

    Actions are Direction values: 0=Up, 1=Down, 2=Left, 3=Right.
    """

    UP = Direction.UP
    DOWN = Direction.DOWN
    LEFT = Direction.LEFT
    RIGHT = Direction.RIGHT
    ACTION_NAMES = ['Up', 'Down', 'Left', 'Right']

    def __init__(self, seed: int = 42, base_counts: Sequence[int] = DEFAULT_BASE_COUNTS):
        """Create a new game with the given seed."""
        self._seed = seed
        self._base_counts = tuple(base_counts)
        self._rng = random.Random(seed)
        self.state = State.from_base_values(self._rng, self._base_counts)

    def reset(self, seed: Optional[int] = None) -> List[int]:
        """Reset the game to initial state."""
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)
        self.state = State.from_base_values(self._rng, self._base_counts)
        return self.board

    def step(self, action: int) -> Dict:
        """
        Execute a move in the given direction.

        Args:
            action: 0=Up, 1=Down, 2=Left, 3=Right

        Returns:
            Dict with keys: board, score, reward, changed, done
        """
        try:
            direction = Direction(action)
        except ValueError:
            raise ValueError(f"Invalid action: {action}. Must be one of 0, 1, 2, 3") from None

        if self.is_done():
            return {
                'board': self.board,
                'score': self.score,
                'reward': 0,
                'changed': False,
                'done': True
            }

        old_grid = self.state.grid
        old_score = self.score
        self.state.shift(self._rng, direction)

        changed = self.state.grid != old_grid
        if not changed:
            logger.debug("Move %s left the board unchanged", direction.name)

        return {
            'board': self.board,
            'score': self.score,
            'reward': self.score - old_score,
            'changed': changed,
            'done': self.is_done()
        }

    def undo(self) -> List[int]:
        """Revert the last step."""
        self.state.shift_back()
        return self.board

    @property
    def board(self) -> List[int]:
        """Current board (16 values, row-major order)."""
        return [int(v) for v in self.state.grid.matrix.flat]

    @property
    def score(self) -> int:
        return self.state.score()

    @property
    def next_tile(self) -> int:
        return self.state.next_tile

    def is_done(self) -> bool:
        """Check if the game is over (no valid moves)."""
        return self.state.game_over or self.state.grid.is_terminal()

    def legal_actions(self) -> List[bool]:
        """Get legal actions as [Up, Down, Left, Right] booleans."""
        return [self.state.grid.movable(direction) for direction in Direction]

    def max_tile(self) -> int:
        return self.state.grid.max()

    def empty_count(self) -> int:
        return self.state.grid.empty_count()

    def __repr__(self) -> str:
        return f"Game(score={self.score}, max_tile={self.max_tile()}, done={self.is_done()})"

    def __str__(self) -> str:
        return f"Score: {self.score}  Next: {self.next_tile}\n{self.state.grid}"
