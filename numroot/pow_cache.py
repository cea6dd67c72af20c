"""Exponentiation with memoized intermediate powers.

Powers are built by splitting the exponent in halves, so computing ``b**e``
leaves ``b**(e//2)``, ``b**(e//4)``... in the cache for later calls with the
same base. Entries carry a recency stamp used to evict the least recently
used ones.
"""

from __future__ import annotations

import gc
import threading

from .errors import InvalidArgumentError, NegativeExponentError
from .logger import get_logger
from .settings import load_settings

logger = get_logger("pow_cache")

Key = tuple[int, int]
Entry = tuple[int, int]


class PowCache:
    """Thread-safe cache of ``(basement, exponent) -> power``.

    Every operation runs under one reentrant lock, so at most one thread
    executes cache logic at a time.
    """

    def __init__(self, counter_limit: int | None = None):
        if counter_limit is None:
            counter_limit = load_settings().pow_cache_counter_limit
        self.counter_limit = counter_limit
        self._data: dict[Key, Entry] = {}
        self._counter = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    @property
    def counter(self) -> int:
        """The last recency stamp handed out."""
        with self._lock:
            return self._counter

    def pow(self, basement: int, exponent: int) -> int:
        """Uncached reference exponentiation."""
        if exponent < 0:
            raise NegativeExponentError(exponent)
        return basement**exponent

    def pow_cached(self, basement: int, exponent: int) -> int:
        """Computes ``basement**exponent`` reusing and filling the cache."""
        if exponent < 0:
            raise NegativeExponentError(exponent)

        with self._lock:
            if self._counter >= self.counter_limit:
                self._shrink(len(self._data) // 2)
            try:
                return self._calculate(basement, exponent)
            except MemoryError:
                logger.warning(
                    "Out of memory computing power, clearing %d cached items",
                    len(self._data),
                )
                self._shrink(0)
                # a second failure propagates
                return self._calculate(basement, exponent)

    def shrink(self, keep_count: int) -> None:
        """Keeps the ``keep_count`` most recently used entries.

        ``shrink(0)`` empties the cache and resets the recency counter.
        """
        if keep_count < 0:
            raise InvalidArgumentError(
                f"keep_count must be non-negative, got {keep_count}"
            )
        with self._lock:
            self._shrink(keep_count)

    def clear(self) -> None:
        self.shrink(0)

    def _calculate(self, basement: int, exponent: int) -> int:
        if exponent == 0:
            return 1
        if basement == 0:
            return 0
        if exponent == 1:
            return basement

        key = (basement, exponent)
        entry = self._data.get(key)
        if entry is not None:
            self._stamp(key, entry[0])
            return entry[0]

        left = exponent // 2
        right = exponent - left
        power = self._calculate(basement, left) * self._calculate(basement, right)
        self._stamp(key, power)
        return power

    def _stamp(self, key: Key, power: int) -> None:
        self._counter += 1
        self._data[key] = (power, self._counter)

    def _shrink(self, keep_count: int) -> None:
        before = len(self._data)
        if keep_count == 0:
            self._data.clear()
            self._counter = 0
            gc.collect()
        else:
            survivors = sorted(self._data.items(), key=lambda item: item[1][1])
            survivors = survivors[-keep_count:]
            # renumber densely, preserving the recency order
            self._data = {
                key: (power, stamp)
                for stamp, (key, (power, _)) in enumerate(survivors, start=1)
            }
            self._counter = len(self._data)
        logger.info("Shrunk power cache from %d to %d items", before, len(self._data))


_default_cache: PowCache | None = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> PowCache:
    """The process-wide cache used when no cache is passed explicitly."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = PowCache()
        return _default_cache


def pow(basement: int, exponent: int) -> int:
    return get_default_cache().pow(basement, exponent)


def pow_cached(basement: int, exponent: int) -> int:
    return get_default_cache().pow_cached(basement, exponent)


def shrink_cache(keep_count: int) -> None:
    get_default_cache().shrink(keep_count)


def items_in_cache() -> int:
    return len(get_default_cache())
