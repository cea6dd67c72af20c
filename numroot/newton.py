"""Newton's method for integer roots, suited for small degrees."""

from __future__ import annotations

from .algorithms import BASE, decimal_root_upper_bound
from .pow_cache import PowCache, get_default_cache


def get_root(
    radicand: int, degree: int, cache: PowCache | None = None
) -> tuple[int, bool]:
    """Floor `degree`-th root of `radicand` >= 1 and whether it is exact."""
    if cache is None:
        cache = get_default_cache()

    # it needs to be an upper bound, iterations then decrease monotonically
    current_result = cache.pow_cached(BASE, decimal_root_upper_bound(radicand, degree))
    degree1 = degree - 1

    previous_result = 0
    delta = 0
    # near the root the iteration alternates between the floor root and the
    # next integer, a negative delta means the floor root was just passed
    while previous_result != current_result and delta >= 0:
        counterweight = current_result**degree1
        previous_result = current_result
        current_result = (
            degree1 * current_result + radicand // counterweight
        ) // degree
        delta = previous_result - current_result

    # on either exit condition previous_result holds the floor root
    return previous_result, previous_result**degree == radicand
