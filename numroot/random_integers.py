import random


def next_in_range(rng: random.Random, minimum: int, maximum: int) -> int:
    """Uniformly random integer in [minimum, maximum], both bounds inclusive."""
    if maximum < minimum:
        raise ValueError("Max value can not be less than min value")
    residual = maximum - minimum
    if residual == 0:
        return maximum
    return minimum + rng.randint(0, residual)


def random_digits(rng: random.Random, length: int, radix: int = 10) -> int:
    """Random number with exactly `length` digits in `radix`."""
    # the leading digit must not be zero, unless it is the only one
    value = rng.randint(1, radix - 1) if length > 1 else rng.randint(0, radix - 1)
    for _ in range(length - 1):
        value = value * radix + rng.randint(0, radix - 1)
    return value


def next_with_length(
    rng: random.Random, min_length: int, max_length: int, radix: int = 10
) -> int:
    """
    Random non-negative number whose length in `radix` digits is uniformly
    chosen from [min_length, max_length].
    """
    if radix < 2:
        raise ValueError(f"Radix must be at least 2, got {radix}")
    if min_length < 1:
        raise ValueError(f"Length must be positive, got {min_length}")
    if max_length < min_length:
        raise ValueError("Max length can not be less than min length")
    return random_digits(rng, rng.randint(min_length, max_length), radix)
