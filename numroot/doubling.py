"""Roots of power-of-two degrees as repeated integer square roots.

Relies on isqrt(isqrt(n)) == floor(n ** (1/4)), and so on for every further
halving of the degree.
"""

from __future__ import annotations

from .algorithms import integer_sqrt, is_power_of_two
from .errors import InvalidArgumentError


def get_root(radicand: int, degree: int) -> tuple[int, bool]:
    """Floor `degree`-th root of `radicand` and whether it is exact."""
    if not is_power_of_two(degree):
        raise InvalidArgumentError(f"Degree must be a power of two, got {degree}")

    basement = radicand
    power = degree
    while power > 1:
        basement = integer_sqrt(basement)
        power >>= 1

    return basement, basement**degree == radicand
