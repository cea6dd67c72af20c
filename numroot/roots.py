"""Integer Nth roots of arbitrary-precision non-negative integers."""

from __future__ import annotations

from typing import NamedTuple

from . import digits, doubling, newton
from .errors import (
    AmbiguousExponentError,
    NegativeDegreeError,
    NegativeRadicandError,
    UnsupportedAlgorithmError,
)
from .logger import get_logger
from .pow_cache import PowCache
from .weights import Algorithm, estimate_all

logger = get_logger("roots")


class RootResult(NamedTuple):
    """The floor root and whether ``value ** degree`` equals the radicand."""

    value: int
    is_exact: bool


def choose_algorithm(radicand: int, degree: int) -> Algorithm | None:
    """The cheapest applicable algorithm, earlier members of Algorithm win ties."""
    weights = estimate_all(radicand, degree)
    applicable = [algorithm for algorithm in Algorithm if weights[algorithm].applicable]
    if not applicable:
        return None
    chosen = min(applicable, key=lambda algorithm: weights[algorithm].weight)
    logger.debug(
        "Chose %s for degree %d",
        chosen.value,
        degree,
        extra={"data": {a.value: w.weight for a, w in weights.items()}},
    )
    return chosen


def nth_root(radicand: int, degree: int, cache: PowCache | None = None) -> RootResult:
    """
    Computes the integer `degree`-th root of `radicand`.
    Returns the exact root when there is one, otherwise the nearest value from below,
    together with a flag telling which of the two it is.
    """
    if radicand < 0:
        raise NegativeRadicandError(radicand)
    if degree < 0:
        raise NegativeDegreeError(degree)
    if degree == 0:
        raise AmbiguousExponentError(degree)

    # roots of 0 and 1 are themselves
    if radicand <= 1:
        return RootResult(radicand, True)

    algorithm = choose_algorithm(radicand, degree)
    if algorithm is Algorithm.DIGITS:
        return RootResult(*digits.get_root(radicand, degree, cache))
    if algorithm is Algorithm.NEWTON:
        return RootResult(*newton.get_root(radicand, degree, cache))
    if algorithm is Algorithm.DOUBLING:
        return RootResult(*doubling.get_root(radicand, degree))

    logger.error("No root extraction algorithm selected for degree %d", degree)
    raise UnsupportedAlgorithmError(radicand, degree)
