import argparse
import random

import pytest

from threes.evaluate import (evaluate, get_policy, greedy_policy, main, parse_base_counts,
                             play_episode, random_policy)
from threes.game_env import Game


def test_random_policy_picks_legal_move(rng: random.Random) -> None:
    game = Game(seed=8)
    for _ in range(20):
        if not any(game.legal_actions()):
            break
        action = random_policy(game, rng)
        assert game.legal_actions()[action]
        game.step(action)


def test_greedy_policy_leaves_game_untouched(rng: random.Random) -> None:
    game = Game(seed=8)
    board, tile = game.board, game.next_tile
    action = greedy_policy(game, rng)
    assert game.legal_actions()[action]
    assert game.board == board
    assert game.next_tile == tile


def test_greedy_policy_keeps_undo_history() -> None:
    game = Game(seed=11)
    before = game.board
    game.step(Game.RIGHT)
    greedy_policy(game, random.Random(0))
    assert game.undo() == before


def test_play_episode_respects_max_steps(rng: random.Random) -> None:
    game = Game(seed=8)
    assert play_episode(game, random_policy, rng, max_steps=5) <= 5


def test_evaluate_statistics() -> None:
    stats = evaluate(random_policy, num_episodes=3, seed=0, max_steps=50)
    assert stats['num_episodes'] == 3
    assert len(stats['scores']) == 3
    assert stats['min_score'] <= stats['avg_score'] <= stats['max_score']
    assert sum(stats['tile_distribution'].values()) == 3


def test_evaluate_is_deterministic() -> None:
    a = evaluate(greedy_policy, num_episodes=2, seed=4, max_steps=30)
    b = evaluate(greedy_policy, num_episodes=2, seed=4, max_steps=30)
    assert a['scores'] == b['scores']


def test_get_policy() -> None:
    assert get_policy('greedy') is greedy_policy
    with pytest.raises(ValueError):
        get_policy('nope')


def test_parse_base_counts() -> None:
    assert parse_base_counts('4,2,2,2') == [4, 2, 2, 2]
    with pytest.raises(argparse.ArgumentTypeError):
        parse_base_counts('4,x')
    with pytest.raises(argparse.ArgumentTypeError):
        parse_base_counts('10,10')


def test_main(capsys) -> None:
    main(['--policy', 'greedy', '--episodes', '2', '--max-steps', '20', '--compare-random'])
    out = capsys.readouterr().out
    assert "EVALUATION RESULTS" in out
    assert "RANDOM BASELINE" in out


def test_evaluate_percentiles_are_plain_floats() -> None:
    stats = evaluate(random_policy, num_episodes=2, seed=1, max_steps=20)
    for key in ('p25_score', 'p75_score', 'p90_score', 'p95_score'):
        assert type(stats[key]) is float
