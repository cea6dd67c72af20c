"""Approximate cost model for choosing a root extraction algorithm.

The formulas are relative heuristics, not timings, and are expected to be
tuned. Each one works from the decimal length of the expected root.
Weights are whole numbers of "steps" except for an algorithm that cannot
handle the input, whose weight is infinite.
"""

from __future__ import annotations

import enum
import math
from typing import NamedTuple

from .algorithms import BASE, decimal_root_length, is_power_of_two

# bits needed per binary-search step over one decimal digit
_DIGIT_STEP_BITS = math.log2(BASE) + 1


class Algorithm(enum.Enum):
    # declaration order is the tie-break order
    DIGITS = "digits"
    NEWTON = "newton"
    DOUBLING = "doubling"


class AlgorithmWeight(NamedTuple):
    weight: float
    applicable: bool


NOT_APPLICABLE = AlgorithmWeight(math.inf, False)


def digits_weight(radicand: int, degree: int) -> AlgorithmWeight:
    """Digit groups times binary-search steps per group."""
    quotient = decimal_root_length(radicand, degree)
    return AlgorithmWeight(math.floor(0.8 * quotient * _DIGIT_STEP_BITS), True)


def newton_weight(radicand: int, degree: int) -> AlgorithmWeight:
    """Precision doublings of Newton's method, scaled by the degree."""
    quotient = decimal_root_length(radicand, degree)
    # log2(BASE**quotient - BASE**(quotient - 1)) without building the number
    span_bits = quotient * math.log2(BASE) + math.log2(1 - 1 / BASE)
    weight = math.log2(span_bits) * degree / 2 + 3
    return AlgorithmWeight(math.floor(weight), True)


def doubling_weight(radicand: int, degree: int) -> AlgorithmWeight:
    """Repeated square roots, only for power-of-two degrees."""
    if not is_power_of_two(degree):
        return NOT_APPLICABLE
    quotient = decimal_root_length(radicand, degree)
    return AlgorithmWeight(math.floor(0.2 * quotient * _DIGIT_STEP_BITS), True)


_ESTIMATORS = {
    Algorithm.DIGITS: digits_weight,
    Algorithm.NEWTON: newton_weight,
    Algorithm.DOUBLING: doubling_weight,
}


def estimate(radicand: int, degree: int, algorithm: Algorithm) -> AlgorithmWeight:
    return _ESTIMATORS[algorithm](radicand, degree)


def estimate_all(radicand: int, degree: int) -> dict[Algorithm, AlgorithmWeight]:
    return {algorithm: estimate(radicand, degree, algorithm) for algorithm in Algorithm}
