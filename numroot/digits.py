"""Digit-by-digit root extraction.

The root is found one decimal digit at a time, starting from the most
significant one. Dropping ``degree`` decimal digits of the radicand drops one
digit of its root, so the radicand is cut into a chain of ever shorter
slices and every slice adds one digit to the root of the previous slice.
Suited for large degrees.
"""

from __future__ import annotations

from .algorithms import BASE
from .pow_cache import PowCache, get_default_cache


def radicand_slices(radicand: int, digits_shift: int) -> list[int]:
    """The radicand followed by its successive quotients by `digits_shift`."""
    slices = [radicand]
    while slices[-1] >= digits_shift:
        slices.append(slices[-1] // digits_shift)
    return slices


def get_root(
    radicand: int, degree: int, cache: PowCache | None = None
) -> tuple[int, bool]:
    """Floor `degree`-th root of `radicand` >= 1 and whether it is exact."""
    if cache is None:
        cache = get_default_cache()
    digits_shift = cache.pow_cached(BASE, degree)
    slices = radicand_slices(radicand, digits_shift)

    is_exact = False
    min_result, max_result = 1, BASE
    current_result = current_power = 0

    # from the most significant slice down to the radicand itself
    for i, current_slice in enumerate(reversed(slices)):
        # only the last slice decides exactness
        is_exact = False

        if i > 0:
            current_result *= BASE
            current_power *= digits_shift
            # tangent y = k*x + b at the previous root, x^degree is convex
            # so the crossing with current_slice bounds the root from above
            k = degree * current_power // current_result
            b = current_power - k * current_result
            x = (current_slice - b) // k + 1
            if x < max_result:
                max_result = x

        # binary search within [min_result, max_result)
        current_result = (min_result + max_result) // 2
        previous_result = 0
        while previous_result != current_result:
            current_power = current_result**degree
            if current_power == current_slice:
                is_exact = True
                break
            previous_result = current_result
            if current_power < current_slice:
                min_result = current_result
            else:
                max_result = current_result
            current_result = (min_result + max_result) // 2

        # shift one digit to the left for the next slice
        min_result = current_result * BASE
        max_result = (current_result + 1) * BASE

    return current_result, is_exact
