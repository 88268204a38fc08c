"""
Primitive samplers: one unbiased value of a single numeric domain,
drawn directly from an entropy source.
"""

import struct
from decimal import Decimal

from secure_random.core.entropy import EntropySource
from secure_random.core.exceptions import InvalidRangeError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Unit fractions are drawn from [1, UNIT_FRACTION_RESOLUTION] and divided back down,
# so they land in (0, 1] on a 1/100 grid.
UNIT_FRACTION_RESOLUTION = 100
_RESOLUTION_DECIMAL = Decimal(UNIT_FRACTION_RESOLUTION)


def _check_int(value, name: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def check_int_range(low: int, high_exclusive: int, lower_limit: int, upper_limit: int):
    """
    Validate an exclusive-upper integer range against a domain.

    Both bounds must be representable in the domain and the range must not be empty.
    """
    _check_int(low, "min_value")
    _check_int(high_exclusive, "max_value")
    if low >= high_exclusive:
        raise InvalidRangeError(
            low, high_exclusive,
            f"Invalid range: min {low} must be less than exclusive max {high_exclusive}",
        )
    if low < lower_limit or high_exclusive > upper_limit + 1:
        raise InvalidRangeError(
            low, high_exclusive,
            f"Invalid range: [{low}, {high_exclusive}) exceeds [{lower_limit}, {upper_limit}]",
        )


def next_byte(source: EntropySource) -> int:
    return source.bytes(1)[0]


def next_bytes(source: EntropySource, count: int) -> bytes:
    _check_int(count, "count")
    if count < 0:
        raise ValueError("count must be non-negative")
    return source.bytes(count)


def fill_bytes(source: EntropySource, buffer):
    """Overwrite a writable buffer (bytearray, memoryview) with random bytes and return it."""
    view = memoryview(buffer).cast("B")
    view[:] = source.bytes(len(view))
    return buffer


def next_int32(source: EntropySource, low: int, high_exclusive: int) -> int:
    check_int_range(low, high_exclusive, INT32_MIN, INT32_MAX)
    return source.uniform_int32(low, high_exclusive)


def next_int64(source: EntropySource, low: int, high_exclusive: int) -> int:
    check_int_range(low, high_exclusive, INT64_MIN, INT64_MAX)
    return source.uniform_int64(low, high_exclusive)


def next_unit_fraction(source: EntropySource) -> float:
    """Returns a float in (0.0, 1.0] with a resolution of 1/100."""
    return source.uniform_int32(1, UNIT_FRACTION_RESOLUTION + 1) / float(UNIT_FRACTION_RESOLUTION)


def next_unit_fraction_decimal(source: EntropySource) -> Decimal:
    """Decimal counterpart of `next_unit_fraction`; 0.37 is exactly Decimal('0.37')."""
    return Decimal(source.uniform_int32(1, UNIT_FRACTION_RESOLUTION + 1)) / _RESOLUTION_DECIMAL


def next_single(source: EntropySource) -> float:
    """The unit fraction rounded to IEEE-754 single precision."""
    return struct.unpack("f", struct.pack("f", next_unit_fraction(source)))[0]
