"""Tests for weights.py: the heuristic cost model."""

from __future__ import annotations

import math

import pytest

from numroot.weights import (
    Algorithm,
    AlgorithmWeight,
    digits_weight,
    doubling_weight,
    estimate,
    estimate_all,
    newton_weight,
)


class TestFormulas:
    def test_digits(self):
        # 0.8 * 3 * (log2(10) + 1) = 10.37
        assert digits_weight(10**6, 2) == AlgorithmWeight(10, True)

    def test_newton(self):
        # log2(log2(1000 - 100)) * 2 / 2 + 3 = 6.29
        assert newton_weight(10**6, 2) == AlgorithmWeight(6, True)

    def test_doubling(self):
        # 0.2 * 3 * (log2(10) + 1) = 2.59
        assert doubling_weight(10**6, 2) == AlgorithmWeight(2, True)

    def test_doubling_needs_power_of_two(self):
        weight = doubling_weight(10**6, 3)
        assert weight.applicable is False
        assert math.isinf(weight.weight)

    def test_newton_span_matches_exact_integer(self):
        for quotient in range(1, 60):
            radicand = 10 ** (2 * quotient - 1) + 1
            span = 10**quotient - 10 ** (quotient - 1)
            expected = math.floor(math.log2(math.log2(span)) + 3)
            assert newton_weight(radicand, 2) == AlgorithmWeight(expected, True)

    def test_newton_huge_radicand(self):
        # root of about 3010300 digits: log2(log2(10**3010300)) / 2 + 3 = 14.63
        assert newton_weight(1 << 10_000_000, 1) == AlgorithmWeight(14, True)

    def test_newton_grows_with_degree(self):
        assert newton_weight(2**1000, 97).weight > newton_weight(2**1000, 5).weight

    def test_digits_grows_with_root_length(self):
        assert digits_weight(10**600, 3).weight > digits_weight(10**60, 3).weight


class TestEstimate:
    def test_dispatch(self):
        for algorithm in Algorithm:
            assert estimate(2 * 10**6, 4, algorithm) == estimate_all(2 * 10**6, 4)[algorithm]

    def test_covers_every_algorithm_in_order(self):
        assert list(estimate_all(12345, 7)) == list(Algorithm)

    @pytest.mark.parametrize("degree", [1, 2, 3, 5, 8, 100, 1000])
    def test_digits_and_newton_always_applicable(self, degree):
        weights = estimate_all(10**50 + 7, degree)
        assert weights[Algorithm.DIGITS].applicable
        assert weights[Algorithm.NEWTON].applicable

    def test_weights_are_whole_numbers(self):
        for weight in estimate_all(3**333, 16).values():
            assert weight.weight == int(weight.weight)
