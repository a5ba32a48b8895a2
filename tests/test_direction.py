from threes.direction import Dimension, Direction


def test_reverse_needed_for_down_and_right() -> None:
    assert Direction.DOWN.reverse_needed
    assert Direction.RIGHT.reverse_needed
    assert not Direction.UP.reverse_needed
    assert not Direction.LEFT.reverse_needed


def test_dimension() -> None:
    assert Direction.UP.dimension is Dimension.COL
    assert Direction.DOWN.dimension is Dimension.COL
    assert Direction.LEFT.dimension is Dimension.ROW
    assert Direction.RIGHT.dimension is Dimension.ROW
    assert Dimension.ROW.inverse() is Dimension.COL
    assert Dimension.COL.inverse() is Dimension.ROW


def test_entry_edge() -> None:
    assert Direction.LEFT.entry_edge == 3
    assert Direction.UP.entry_edge == 3
    assert Direction.RIGHT.entry_edge == 0
    assert Direction.DOWN.entry_edge == 0


def test_action_indices() -> None:
    assert [int(d) for d in Direction] == [0, 1, 2, 3]
    assert Direction(2) is Direction.LEFT
