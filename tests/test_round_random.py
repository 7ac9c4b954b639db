"""Stochastic rounding tests."""

import random

from mixin_math import PCG32, round_random


class FixedSource:
    def __init__(self, draw):
        self.draw = draw

    def random(self):
        return self.draw


def test_round_random_picks_ceiling_below_fraction():
    assert round_random(3.8, FixedSource(0.79)) == 4
    assert round_random(3.8, FixedSource(0.81)) == 3


def test_round_random_negative_value_uses_euclidean_fraction():
    # -1.25 sits between -2 and -1 with fraction 0.75 above the floor
    assert round_random(-1.25, FixedSource(0.7)) == -1
    assert round_random(-1.25, FixedSource(0.8)) == -2


def test_round_random_integer_is_unchanged():
    rng = random.Random(1)
    assert {round_random(6.0, rng) for _ in range(500)} == {6}


def test_round_random_frequency_matches_fraction():
    rng = PCG32.seeded(0xC0FFEE)
    draws = 100_000
    ups = sum(1 for _ in range(draws) if round_random(3.8, rng) == 4)

    assert abs(ups / draws - 0.8) < 0.01


def test_round_random_preserves_expected_value():
    rng = random.Random(99)
    draws = 50_000
    mean = sum(round_random(2.3, rng) for _ in range(draws)) / draws
    assert abs(mean - 2.3) < 0.02
