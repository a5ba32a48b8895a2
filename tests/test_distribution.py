import random

from threes.distribution import Distribution

from tests.helpers import FixedRandom


def test_sample_is_positive(rng: random.Random) -> None:
    d = Distribution(0.5)
    assert all(d.sample(rng) >= 1 for _ in range(1000))


def test_sample_is_geometric() -> None:
    d = Distribution(0.5)
    r = FixedRandom([0.0, 0.4, 0.6, 0.8])
    # x = 1 - random(): 1.0, 0.6, 0.4, 0.2
    assert [d.sample(r) for _ in range(4)] == [1, 1, 2, 3]


def test_sample_mean_is_inverse_of_p() -> None:
    d = Distribution(0.5)
    r = random.Random(42)
    samples = [d.sample(r) for _ in range(20000)]
    assert abs(sum(samples) / len(samples) - 2.0) < 0.1


def test_sample_is_mostly_small() -> None:
    d = Distribution(0.5)
    r = random.Random(7)
    samples = [d.sample(r) for _ in range(1000)]
    assert sum(1 for s in samples if s < 10) >= 990


def test_certain_success_always_yields_one(rng: random.Random) -> None:
    d = Distribution(1.0)
    assert {d.sample(rng) for _ in range(100)} == {1}
