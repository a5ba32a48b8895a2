"""
Threes-style sliding-merge engine.

The engine is pure and deterministic given a seeded ``random.Random``:
every operation that needs randomness receives the generator from its caller.
"""

from threes.direction import Dimension, Direction
from threes.grid import Grid, ShiftResult
from threes.state import State
from threes.tile import Tile

__all__ = ['Dimension', 'Direction', 'Grid', 'ShiftResult', 'State', 'Tile']
