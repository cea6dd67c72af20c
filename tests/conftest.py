"""Shared fixtures: a private power cache and a seeded random generator."""

from __future__ import annotations

import random

import pytest

from numroot.pow_cache import PowCache


@pytest.fixture
def cache() -> PowCache:
    """Fresh cache, isolated from the process-wide default."""
    return PowCache(counter_limit=2**31 - 1)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


def floor_root(radicand: int, degree: int) -> int:
    """Reference floor root by plain bisection."""
    low, high = 0, 1
    while high**degree <= radicand:
        high *= 2
    while high - low > 1:
        mid = (low + high) // 2
        if mid**degree <= radicand:
            low = mid
        else:
            high = mid
    return low


@pytest.fixture
def reference_root():
    return floor_root
