"""Tests for randomness helpers."""

import random

from truthbot.randomness import create_random_source


def test_create_random_source_returns_dedicated_instance() -> None:
    rng = create_random_source(7)
    assert isinstance(rng, random.Random)
    assert rng is not create_random_source(7)


def test_same_seed_same_draws() -> None:
    a = create_random_source(42)
    b = create_random_source(42)
    assert [a.randint(-10, 9) for _ in range(20)] == [b.randint(-10, 9) for _ in range(20)]


def test_draws_are_inclusive_range() -> None:
    rng = create_random_source(0)
    draws = {rng.randint(-10, 9) for _ in range(2000)}
    assert min(draws) == -10
    assert max(draws) == 9
