"""Test utilities: deterministic entropy sources and chi-square helpers."""

import math
import random
from collections import Counter


class SeededEntropySource:
    """Deterministic stand-in for the system source. Test use only."""

    def __init__(self, seed: int = 1234):
        self._rng = random.Random(seed)

    def bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)

    def uniform_int32(self, low: int, high_exclusive: int) -> int:
        return self._rng.randrange(low, high_exclusive)

    def uniform_int64(self, low: int, high_exclusive: int) -> int:
        return self._rng.randrange(low, high_exclusive)


class ScriptedEntropySource:
    """
    Returns a fixed offset into every integer range and records each call,
    so tests can force rejection and count attempts.
    """

    def __init__(self, int32_offset: int = 0, int64_offset: int = 0):
        self.int32_offset = int32_offset
        self.int64_offset = int64_offset
        self.calls = Counter()
        self.int32_ranges = []
        self.int64_ranges = []

    def bytes(self, n: int) -> bytes:
        self.calls["bytes"] += 1
        return bytes(i % 256 for i in range(n))

    def uniform_int32(self, low: int, high_exclusive: int) -> int:
        self.calls["int32"] += 1
        self.int32_ranges.append((low, high_exclusive))
        return min(low + self.int32_offset, high_exclusive - 1)

    def uniform_int64(self, low: int, high_exclusive: int) -> int:
        self.calls["int64"] += 1
        self.int64_ranges.append((low, high_exclusive))
        return min(low + self.int64_offset, high_exclusive - 1)


class FailingEntropySource:
    def __init__(self, error: Exception):
        self.error = error

    def bytes(self, n: int) -> bytes:
        raise self.error

    def uniform_int32(self, low: int, high_exclusive: int) -> int:
        raise self.error

    def uniform_int64(self, low: int, high_exclusive: int) -> int:
        raise self.error


def chi_square(counts: Counter, categories, total: int) -> float:
    expected = total / len(categories)
    return sum((counts.get(c, 0) - expected) ** 2 / expected for c in categories)


def chi_square_critical(df: int, z: float = 4.0) -> float:
    """Wilson-Hilferty approximation of the chi-square quantile z standard deviations out."""
    k = 2.0 / (9.0 * df)
    return df * (1.0 - k + z * math.sqrt(k)) ** 3
