"""Tests for newton.py: integer Newton iteration."""

from __future__ import annotations

import pytest

from numroot import newton


class TestGetRoot:
    def test_exact_square(self, cache):
        assert newton.get_root(10**6, 2, cache) == (1000, True)

    def test_inexact_square(self, cache):
        assert newton.get_root(10**6 + 1, 2, cache) == (1000, False)

    def test_one(self, cache):
        assert newton.get_root(1, 3, cache) == (1, True)

    def test_degree_one(self, cache):
        assert newton.get_root(12345, 1, cache) == (12345, True)

    def test_seed_above_float_precision(self, cache):
        # log10 loses the +1, the seed must still bound the root from above
        root = 10**20 + 1
        assert newton.get_root(root**2, 2, cache) == (root, True)
        assert newton.get_root(root**2 - 1, 2, cache) == (root - 1, False)

    def test_uses_cache_for_seed(self, cache):
        newton.get_root(10**30 + 5, 3, cache)
        assert (10, 11) in cache

    @pytest.mark.parametrize("degree", [2, 3, 5, 6, 11, 40])
    def test_floor_invariant(self, degree, cache, rng, reference_root):
        for _ in range(40):
            radicand = rng.getrandbits(rng.randint(2, 800)) + 2
            value, is_exact = newton.get_root(radicand, degree, cache)
            assert value == reference_root(radicand, degree)
            assert is_exact == (value**degree == radicand)

    @pytest.mark.parametrize("degree", [2, 3, 7])
    def test_neighbours_of_perfect_powers(self, degree, cache, rng):
        for _ in range(40):
            basement = rng.randint(2, 10**30)
            power = basement**degree
            assert newton.get_root(power - 1, degree, cache) == (basement - 1, False)
            assert newton.get_root(power, degree, cache) == (basement, True)
            assert newton.get_root(power + 1, degree, cache) == (basement, False)
