import pytest

from threes.game_env import Game
from threes.grid import Grid
from threes.state import State
from threes.tile import Tile

TERMINAL = [
    [3, 6, 3, 6],
    [6, 3, 6, 3],
    [3, 6, 3, 6],
    [6, 3, 6, 3],
]


def test_same_seed_same_game() -> None:
    a, b = Game(seed=7), Game(seed=7)
    assert a.board == b.board
    assert a.next_tile == b.next_tile
    for action in [Game.LEFT, Game.UP, Game.RIGHT, Game.DOWN] * 3:
        assert a.step(action) == b.step(action)


def test_reset_replays_seed() -> None:
    game = Game(seed=3)
    start = game.board
    game.step(Game.LEFT)
    assert game.reset() == start
    assert len(game.reset(seed=4)) == 16


def test_step_result() -> None:
    game = Game(seed=1)
    result = game.step(Game.UP)
    assert set(result) == {'board', 'score', 'reward', 'changed', 'done'}
    assert len(result['board']) == 16
    assert result['board'] == game.board


def test_step_rejects_unknown_action() -> None:
    game = Game(seed=1)
    with pytest.raises(ValueError) as e:
        game.step(7)
    assert "Invalid action" in str(e.value)


def test_undo() -> None:
    game = Game(seed=11)
    before, tile = game.board, game.next_tile
    game.step(Game.RIGHT)
    assert game.undo() == before
    assert game.next_tile == tile


def test_reward_is_score_delta() -> None:
    game = Game(seed=5)
    game.state = State(Grid([[3, 3, 0, 0], [0] * 4, [0] * 4, [0] * 4]), Tile(1))
    result = game.step(Game.LEFT)
    assert result['changed']
    assert result['score'] == 9
    assert result['reward'] == 9 - 6


def test_finished_game() -> None:
    game = Game(seed=5)
    game.state = State(Grid(TERMINAL), Tile(1))
    assert game.legal_actions() == [False, False, False, False]

    result = game.step(Game.LEFT)
    assert result['done'] and not result['changed']
    assert game.is_done()

    result = game.step(Game.UP)
    assert result == {
        'board': game.board,
        'score': game.score,
        'reward': 0,
        'changed': False,
        'done': True,
    }


def test_accessors() -> None:
    game = Game(seed=2, base_counts=[0, 16])
    assert game.max_tile() == 1
    assert game.empty_count() == 0
    assert "Score: 0" in str(game)
    assert "done=False" in repr(game)


def test_step_into_dead_board_is_done() -> None:
    game = Game(seed=5)
    # Left merges the 12s; the pending 6 fills the last gap and nothing can combine
    game.state = State(Grid([
        [12, 12, 6, 3],
        [6, 3, 6, 3],
        [3, 6, 3, 6],
        [6, 3, 6, 3],
    ]), Tile(6))
    assert not game.is_done()

    result = game.step(Game.LEFT)
    assert result['changed']
    assert result['board'][:4] == [24, 6, 3, 6]
    assert result['done']
    assert game.is_done()
    assert game.legal_actions() == [False, False, False, False]
