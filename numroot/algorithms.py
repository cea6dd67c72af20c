import math

import numpy as np

# numeral base used by the root extractors and their cost model
BASE = 10

# ~1 << 57, float64 sqrt plus a decrement is exact below this
_SMALL_SQRT_LIMIT = 144838757784765629
# ~long.max * long.max, one Newton step after float64 sqrt is exact below this
_MEDIUM_SQRT_LIMIT = 8.5e37
# window bits, keeps the hardware seed inside the float64 mantissa
_SEED_HALF_BITS = 25


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def decimal_root_length(n: int, p: int) -> int:
    """
    Estimates how many decimal digits the integer p-th root of n has,
    i.e. ceil(log10(n) / p). Float based, may be off by one for huge n.
    """
    return math.ceil(math.log10(n) / p)


def decimal_root_upper_bound(n: int, p: int) -> int:
    """Smallest q such that 10^(q*p) >= n, so 10^q is an upper bound of the root."""
    q = decimal_root_length(n, p)
    # float rounding can lose the tail of numbers like 10^(q*p) + 1
    while BASE ** (q * p) < n:
        q += 1
    return q


def _hardware_sqrt(n: int) -> int:
    return int(np.sqrt(np.float64(n)))


def _doubling_newton_sqrt(n: int) -> int:
    """
    Newton iteration which doubles the precision of `a` at every step.
    Keeps (a - 1)^2 < (n >> 2*(c - d)) < (a + 1)^2 where d is the current
    precision in bits, so at d == c it brackets n itself.
    """
    c = (n.bit_length() - 1) // 2
    seed_shift = 0
    while c >> seed_shift > _SEED_HALF_BITS:
        seed_shift += 1

    # first sqrt on hardware, over the high-order window of n
    e = c >> seed_shift
    window = n >> 2 * (c - e)
    a = _hardware_sqrt(window)
    if a * a > window:
        a -= 1

    for shift in reversed(range(seed_shift)):
        d = c >> shift
        a = (a << d - e - 1) + (n >> 2 * c - e - d + 1) // a
        e = d

    # the last step may round up by one
    if a * a > n:
        a -= 1
    return a


def integer_sqrt(n: int) -> int:
    """
    Computes the integer square root (i.e., the largest integer x such that x^2 <= n),
    choosing the strategy by the magnitude of n.
    """
    if n < 0:
        raise ValueError("math domain error")
    if n <= 1:
        return n

    if n < _SMALL_SQRT_LIMIT:
        v = _hardware_sqrt(n)
        if v * v > n:
            v -= 1
        return v

    if n < _MEDIUM_SQRT_LIMIT:
        v = _hardware_sqrt(n)
        v = (v + n // v) >> 1
        return v - 1 if v * v > n else v

    return _doubling_newton_sqrt(n)
