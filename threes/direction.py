"""Move directions."""

from enum import Enum, IntEnum

from threes.config import SIZE


class Dimension(Enum):
    ROW = 'row'
    COL = 'col'

    def inverse(self) -> 'Dimension':
        return Dimension.ROW if self is Dimension.COL else Dimension.COL


class Direction(IntEnum):
    """Values double as action indices (0=Up, 1=Down, 2=Left, 3=Right)."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def reverse_needed(self) -> bool:
        """Down/Right lines are read back to front so index 0 leads the move."""
        return self in (Direction.DOWN, Direction.RIGHT)

    @property
    def dimension(self) -> Dimension:
        """Kind of line the move slides along."""
        if self in (Direction.UP, Direction.DOWN):
            return Dimension.COL
        return Dimension.ROW

    @property
    def entry_edge(self) -> int:
        """Index of the perpendicular line that tiles are vacated from (and enter by)."""
        return 0 if self.reverse_needed else SIZE - 1
