"""
Evaluation script for Threes move policies.

Usage:
    threes-evaluate --policy greedy --episodes 100
    python -m threes.evaluate --policy random --episodes 500 --compare-random
"""

import argparse
import logging
import random
from typing import Callable, Dict, List, Sequence

import numpy as np
from tqdm import tqdm

from threes.config import DEFAULT_BASE_COUNTS, MAX_STEPS
from threes.direction import Direction
from threes.game_env import Game
from threes.state import State

Policy = Callable[[Game, random.Random], int]


def random_policy(game: Game, rng: random.Random) -> int:
    """Uniformly random legal move."""
    valid_actions = [i for i, legal in enumerate(game.legal_actions()) if legal]
    return rng.choice(valid_actions)


def greedy_policy(game: Game, rng: random.Random) -> int:
    """
    One-step lookahead: play each legal move on a scratch copy of the state
    and keep the best score.

    The game itself (board, pending tile, undo snapshot and random source)
    is left untouched.
    """
    grid, tile = game.state.grid, game.state.tile
    best_action, best_key = None, None
    for direction in Direction:
        if not grid.movable(direction):
            continue
        scratch = State(grid.copy(), tile.copy()).shift(rng, direction)
        key = (scratch.score(), scratch.grid.empty_count())
        if best_key is None or key > best_key:
            best_action, best_key = int(direction), key
    return best_action


POLICIES: Dict[str, Policy] = {
    'random': random_policy,
    'greedy': greedy_policy,
}


def get_policy(name: str) -> Policy:
    if name not in POLICIES:
        raise ValueError(f"Unknown policy: {name}. Must be one of {sorted(POLICIES)}")
    return POLICIES[name]


def play_episode(game: Game, policy: Policy, rng: random.Random,
                 max_steps: int = MAX_STEPS) -> int:
    """Play until no move is left. Returns the number of steps taken."""
    steps = 0
    while not game.is_done() and steps < max_steps:
        if not any(game.legal_actions()):
            break
        game.step(policy(game, rng))
        steps += 1
    return steps


def evaluate(policy: Policy, num_episodes: int = 100, seed: int = 0,
             base_counts: Sequence[int] = DEFAULT_BASE_COUNTS,
             max_steps: int = MAX_STEPS, verbose: bool = False,
             progress: bool = False) -> Dict:
    """
    Evaluate a policy over seeded episodes.

    Returns:
        Dict with evaluation statistics
    """
    rng = random.Random(seed)
    scores: List[int] = []
    max_tiles: List[int] = []
    steps_list: List[int] = []

    for i in tqdm(range(num_episodes), desc="Evaluating", disable=not progress):
        game = Game(seed=seed + i, base_counts=base_counts)
        steps = play_episode(game, policy, rng, max_steps=max_steps)

        scores.append(game.score)
        max_tiles.append(game.max_tile())
        steps_list.append(steps)

        if verbose:
            print(f"Episode {i + 1}: Score={game.score}, MaxTile={game.max_tile()}, Steps={steps}")

    # Tile distribution
    tile_counts: Dict[int, int] = {}
    for tile in max_tiles:
        tile_counts[tile] = tile_counts.get(tile, 0) + 1

    percentiles = np.percentile(scores, [25, 50, 75, 90, 95])

    return {
        'num_episodes': num_episodes,
        'avg_score': float(np.mean(scores)),
        'std_score': float(np.std(scores)),
        'max_score': int(np.max(scores)),
        'min_score': int(np.min(scores)),
        'median_score': float(np.median(scores)),
        'p25_score': float(percentiles[0]),
        'p75_score': float(percentiles[2]),
        'p90_score': float(percentiles[3]),
        'p95_score': float(percentiles[4]),
        'avg_max_tile': float(np.mean(max_tiles)),
        'avg_steps': float(np.mean(steps_list)),
        'tile_distribution': tile_counts,
        'scores': scores,
        'max_tiles': max_tiles
    }


def print_tile_distribution(tile_distribution: Dict[int, int], num_episodes: int) -> None:
    print("\nTile Distribution:")
    for tile in sorted(tile_distribution.keys()):
        count = tile_distribution[tile]
        pct = count / num_episodes * 100
        print(f"  {tile:5d}: {count:4d} ({pct:5.1f}%)")


def parse_base_counts(text: str) -> List[int]:
    try:
        counts = [int(part) for part in text.split(',')]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected comma-separated integers, got {text!r}") from None
    if any(c < 0 for c in counts) or sum(counts) > 16:
        raise argparse.ArgumentTypeError("Counts must be non-negative and sum to at most 16")
    return counts


def main(argv=None):
    parser = argparse.ArgumentParser(description='Evaluate a Threes move policy')
    parser.add_argument('--policy', choices=sorted(POLICIES), default='greedy', help='Policy to evaluate')
    parser.add_argument('--episodes', type=int, default=100, help='Number of evaluation episodes')
    parser.add_argument('--seed', type=int, default=12345, help='Random seed')
    parser.add_argument('--max-steps', type=int, default=MAX_STEPS, help='Max steps per episode')
    parser.add_argument('--base-counts', type=parse_base_counts,
                        default=list(DEFAULT_BASE_COUNTS), help='Initial per-value counts, e.g. 4,2,2,2')
    parser.add_argument('--verbose', action='store_true', help='Print each episode')
    parser.add_argument('--compare-random', action='store_true', help='Compare with random baseline')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print(f"Evaluating '{args.policy}' policy for {args.episodes} episodes...")
    stats = evaluate(get_policy(args.policy), num_episodes=args.episodes, seed=args.seed,
                     base_counts=args.base_counts, max_steps=args.max_steps,
                     verbose=args.verbose, progress=True)

    print("\n" + "=" * 50)
    print("EVALUATION RESULTS")
    print("=" * 50)
    print(f"Episodes:      {stats['num_episodes']}")
    print(f"Average Score: {stats['avg_score']:.1f} ± {stats['std_score']:.1f}")
    print(f"Median Score:  {stats['median_score']:.1f}")
    print(f"Min/Max Score: {stats['min_score']} / {stats['max_score']}")
    print(f"Percentiles:   25th={stats['p25_score']:.0f}, 75th={stats['p75_score']:.0f}, 90th={stats['p90_score']:.0f}")
    print(f"Avg Max Tile:  {stats['avg_max_tile']:.1f}")
    print(f"Avg Steps:     {stats['avg_steps']:.1f}")
    print_tile_distribution(stats['tile_distribution'], stats['num_episodes'])

    if args.compare_random and args.policy != 'random':
        print("\n" + "-" * 50)
        print("RANDOM BASELINE")
        print("-" * 50)
        random_stats = evaluate(random_policy, num_episodes=args.episodes, seed=args.seed,
                                base_counts=args.base_counts, max_steps=args.max_steps, progress=True)
        print(f"Average Score: {random_stats['avg_score']:.1f} ± {random_stats['std_score']:.1f}")
        print(f"Max Score:     {random_stats['max_score']}")
        print(f"Avg Max Tile:  {random_stats['avg_max_tile']:.1f}")
        print_tile_distribution(random_stats['tile_distribution'], args.episodes)

        if random_stats['avg_score']:
            improvement = (stats['avg_score'] - random_stats['avg_score']) / random_stats['avg_score'] * 100
            print(f"\nImprovement over random: {improvement:+.1f}%")


if __name__ == "__main__":
    main()
