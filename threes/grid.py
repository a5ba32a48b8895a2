"""
Threes board and its shift/merge algorithm.

A move slides every line (row or column) by at most one cell toward the
move's leading edge. Each line combines at most one pair:
- two equal values above the larger seed double (3+3, 6+6, ...)
- the two seeds combine into their sum (1+2, 2+1)
The first line that combines receives the pending tile in the cell it
vacated; if no line combines, the tile is forced into an empty cell of the
entry edge.
"""

import random
from collections import namedtuple
from typing import List, Optional, Sequence, Tuple

import numpy as np

from threes.buckets import Buckets
from threes.config import SIZE
from threes.direction import Dimension, Direction
from threes.series import Series

ShiftResult = namedtuple('ShiftResult', ['grid', 'tile_placed', 'game_over'])


class Grid:
    """Fixed SIZE x SIZE board; 0 is an empty cell."""

    def __init__(self, matrix, series: Optional[Series] = None):
        self.matrix = np.array(matrix, dtype=np.int64).reshape(SIZE, SIZE)
        self.series = series or Series.default()

    @classmethod
    def rand(cls, rng: random.Random, base_counts: Sequence[int],
             series: Optional[Series] = None) -> 'Grid':
        """
        Build a board from weighted category counts.

        Args:
            rng: Random source
            base_counts: ``base_counts[v]`` is the minimum number of cells
                holding value ``v``; the remainder is padded randomly

        Returns:
            Grid whose cells are the drawn category indices, row-major
        """
        buckets = Buckets(rng, base_counts, SIZE * SIZE)
        return cls(buckets.draw(rng), series)

    # ------------------------------------------------------------------
    # Line algorithm
    # ------------------------------------------------------------------

    def can_combine(self, lead: int, trail: int) -> bool:
        """Whether two adjacent values merge."""
        if lead == trail and lead > self.series.max_seed:
            return True
        return (lead + trail == self.series.seed_total
                and lead < self.series.seed_total
                and trail < self.series.seed_total)

    def shift_line(self, line: Sequence[int]) -> Tuple[List[int], bool]:
        """
        Shift one line toward index 0.

        Returns:
            (new line, merged). The trailing cell of a changed line is left
            at 0 for the caller to fill.
        """
        buf = [int(v) for v in line]
        for i in range(len(buf) - 1):
            lead, trail = buf[i], buf[i + 1]
            if self.can_combine(lead, trail):
                buf[i] = lead + trail
                buf[i + 1:] = buf[i + 2:] + [0]
                return buf, True
            if lead == 0:
                # Gap close: everything behind slides one step
                buf[i:] = buf[i + 1:] + [0]
                return buf, False
        return buf, False

    # ------------------------------------------------------------------
    # Board-level moves
    # ------------------------------------------------------------------

    @staticmethod
    def _get_line(matrix: np.ndarray, index: int, direction: Direction) -> List[int]:
        """Line ``index`` in move order (leading edge first)."""
        if direction.dimension is Dimension.ROW:
            line = matrix[index, :]
        else:
            line = matrix[:, index]
        if direction.reverse_needed:
            line = line[::-1]
        return [int(v) for v in line]

    @staticmethod
    def _set_line(matrix: np.ndarray, index: int, direction: Direction, line: List[int]) -> None:
        if direction.reverse_needed:
            line = line[::-1]
        if direction.dimension is Dimension.ROW:
            matrix[index, :] = line
        else:
            matrix[:, index] = line

    @staticmethod
    def _entry_cells(direction: Direction) -> List[Tuple[int, int]]:
        """Cells of the perpendicular line at the move's entry edge."""
        edge = direction.entry_edge
        if direction.dimension.inverse() is Dimension.COL:
            return [(row, edge) for row in range(SIZE)]
        return [(edge, col) for col in range(SIZE)]

    def shift(self, rng: random.Random, direction: Direction, tile: int) -> ShiftResult:
        """
        Apply a move.

        Args:
            rng: Random source, only used for forced insertion
            direction: Move direction
            tile: Pending tile value

        Returns:
            ShiftResult(grid, tile_placed, game_over) where ``grid`` is a new
            Grid and ``self`` is left untouched
        """
        matrix = self.matrix.copy()
        changed = False
        tile_placed = False

        for index in range(SIZE):
            line = self._get_line(matrix, index, direction)
            new_line, merged = self.shift_line(line)
            if new_line == line:
                continue
            changed = True
            if merged and not tile_placed:
                new_line[-1] = tile
                tile_placed = True
            self._set_line(matrix, index, direction, new_line)

        if changed and not tile_placed:
            empty = [cell for cell in self._entry_cells(direction) if matrix[cell] == 0]
            if empty:
                matrix[rng.choice(empty)] = tile
                tile_placed = True

        grid = Grid(matrix, self.series)
        game_over = not tile_placed and grid.is_terminal()
        return ShiftResult(grid, tile_placed, game_over)

    def movable(self, direction: Direction) -> bool:
        """Whether a move in ``direction`` would change any line."""
        for index in range(SIZE):
            line = self._get_line(self.matrix, index, direction)
            if self.shift_line(line)[0] != line:
                return True
        return False

    def _has_combinable_pair(self, lines) -> bool:
        for line in lines:
            for lead, trail in zip(line[:-1], line[1:]):
                if self.can_combine(int(lead), int(trail)):
                    return True
        return False

    def is_terminal(self) -> bool:
        """No empty cell and no combinable pair in any row or column."""
        if (self.matrix == 0).any():
            return False
        return not (self._has_combinable_pair(self.matrix)
                    or self._has_combinable_pair(self.matrix.T))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def max(self) -> int:
        return int(self.matrix.max())

    def empty_count(self) -> int:
        return int((self.matrix == 0).sum())

    def score(self) -> int:
        """Sum of 3^(rank - 1) over cells of at least the seed total."""
        total = 0
        for value in self.matrix.flat:
            value = int(value)
            if value >= self.series.seed_total:
                total += 3 ** (self.series.n(value) - 1)
        return total

    def rows(self) -> List[List[int]]:
        return self.matrix.tolist()

    def copy(self) -> 'Grid':
        return Grid(self.matrix.copy(), self.series)

    def __getitem__(self, cell: Tuple[int, int]) -> int:
        return int(self.matrix[cell])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.matrix, other.matrix)

    def __repr__(self) -> str:
        return f"Grid({self.rows()})"

    def __str__(self) -> str:
        lines = ["+------+------+------+------+"]
        for row in self.rows():
            cells = ["      " if val == 0 else f"{val:^6}" for val in row]
            lines.append("|" + "|".join(cells) + "|")
            lines.append("+------+------+------+------+")
        return "\n".join(lines)
