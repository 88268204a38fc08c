from decimal import Decimal
from typing import List, Optional, Sequence, TypeVar

from secure_random.core.entropy import EntropySource, SystemEntropySource
from secure_random.core import sampling
from secure_random.core.sampling import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

T = TypeVar("T")


def _as_float(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a float bound, got {type(value).__name__}")
    return float(value)


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a Decimal bound, got {type(value).__name__}")
    # str() keeps 0.1 as Decimal('0.1') instead of its binary expansion
    return Decimal(str(value))


def _signed_bounds(args: tuple, domain_min: int, domain_max: int, name: str):
    """Resolve the (), (max,) and (min, max) call forms into an exclusive integer range."""
    if len(args) == 0:
        return 0, domain_max
    if len(args) == 1:
        (max_value,) = args
        if max_value > 0:
            return 0, max_value
        return domain_min, max_value
    if len(args) == 2:
        return args
    raise TypeError(f"{name}() takes at most 2 arguments ({len(args)} given)")


class SecureRandom:
    """
    Cryptographically strong random values over bytes, 32/64-bit integers,
    floats and decimals, plus item selection and shuffling.

    The entropy source is injected; by default it wraps Python's `secrets` module.
    Instances hold no state besides the source and can be shared between threads
    whenever the source can.
    """

    def __init__(self, source: Optional[EntropySource] = None):
        self.source = source if source is not None else SystemEntropySource()

    # ==================== Bytes ====================

    def next_byte(self) -> int:
        """Returns a random byte value in [0, 255]."""
        return sampling.next_byte(self.source)

    def next_bytes(self, count: int) -> bytes:
        return sampling.next_bytes(self.source, count)

    def fill_bytes(self, buffer):
        """Overwrites a writable buffer with random bytes and returns it."""
        return sampling.fill_bytes(self.source, buffer)

    # ==================== Integers ====================

    def next_int32(self, *bounds: int) -> int:
        """
        Returns a random 32-bit integer.

        next_int32()         -> [0, INT32_MAX)
        next_int32(max)      -> [0, max) if max > 0, else [INT32_MIN, max)
        next_int32(min, max) -> [min, max)
        """
        low, high = _signed_bounds(bounds, INT32_MIN, INT32_MAX, "next_int32")
        return sampling.next_int32(self.source, low, high)

    def next_int64(self, *bounds: int) -> int:
        """
        Returns a random 64-bit integer.

        next_int64()         -> [0, INT64_MAX)
        next_int64(max)      -> [0, max) if max > 0, else [INT64_MIN, max)
        next_int64(min, max) -> [min, max)
        """
        low, high = _signed_bounds(bounds, INT64_MIN, INT64_MAX, "next_int64")
        return sampling.next_int64(self.source, low, high)

    # ==================== Fractions ====================

    def next_float(self, *bounds: float) -> float:
        """
        Returns a random float.

        next_float()         -> (0.0, 1.0] in steps of 0.01
        next_float(max)      -> unit fraction scaled by max (by the float minimum when max == 0)
        next_float(min, max) -> a value in [min, max]
        """
        if len(bounds) == 0:
            return sampling.next_unit_fraction(self.source)
        if len(bounds) == 1:
            return sampling.next_scaled(self.source, sampling.FLOAT, _as_float(bounds[0]))
        if len(bounds) == 2:
            return sampling.next_in_range(
                self.source, sampling.FLOAT, _as_float(bounds[0]), _as_float(bounds[1])
            )
        raise TypeError(f"next_float() takes at most 2 arguments ({len(bounds)} given)")

    def next_single(self) -> float:
        """Returns a unit fraction rounded to single precision."""
        return sampling.next_single(self.source)

    def next_decimal(self, *bounds) -> Decimal:
        """Decimal counterpart of `next_float`, free of binary rounding artifacts."""
        if len(bounds) == 0:
            return sampling.next_unit_fraction_decimal(self.source)
        if len(bounds) == 1:
            return sampling.next_scaled(self.source, sampling.DECIMAL, _as_decimal(bounds[0]))
        if len(bounds) == 2:
            return sampling.next_in_range(
                self.source, sampling.DECIMAL, _as_decimal(bounds[0]), _as_decimal(bounds[1])
            )
        raise TypeError(f"next_decimal() takes at most 2 arguments ({len(bounds)} given)")

    # ==================== Collections ====================

    def select_items(self, choices: Sequence[T], count: int) -> List[T]:
        """Returns `count` items drawn from `choices` with replacement."""
        return sampling.select_items(self.source, choices, count)

    def choice(self, choices: Sequence[T]) -> T:
        """Returns a single random element from a non-empty sequence."""
        return self.select_items(choices, 1)[0]

    def shuffle(self, values: Sequence[T]) -> List[T]:
        """Returns a new list with elements shuffled; `values` is left untouched."""
        return sampling.shuffle(self.source, values)


# Singleton instance
rng = SecureRandom()
