"""
Bounded-range extension for the float and decimal domains.

The only native draw is a coarse unit fraction in (0, 1]. A caller range
[min, max] is hit by scaling that fraction and rejecting candidates that
fall outside the range. The loop is capped at MAX_ATTEMPTS; once the cap is
reached the value comes from an exact integer draw over the integers inside
the range instead, so every call terminates and stays in range.
"""

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from secure_random.core.entropy import EntropySource
from secure_random.core.exceptions import InvalidRangeError
from secure_random.core.logger import get_logger
from secure_random.core.sampling.primitives import (
    INT64_MAX,
    INT64_MIN,
    next_int64,
    next_unit_fraction,
    next_unit_fraction_decimal,
)

logger = get_logger("sampling")

MAX_ATTEMPTS = 1000

FLOAT_MIN = -sys.float_info.max
# Smallest value of a 96-bit fixed-point decimal.
DECIMAL_MIN = Decimal("-79228162514264337593543950335")


@dataclass(frozen=True)
class Domain:
    """Arithmetic needed to run the bounded sampler over one numeric type."""
    name: str
    unit_fraction: Callable[[EntropySource], object]
    minimum: object
    from_int: Callable[[int], object]
    is_finite: Callable[[object], bool]


FLOAT = Domain(
    name="float",
    unit_fraction=next_unit_fraction,
    minimum=FLOAT_MIN,
    from_int=float,
    is_finite=math.isfinite,
)

DECIMAL = Domain(
    name="decimal",
    unit_fraction=next_unit_fraction_decimal,
    minimum=DECIMAL_MIN,
    from_int=Decimal,
    is_finite=lambda value: value.is_finite(),
)


def next_scaled(source: EntropySource, domain: Domain, max_value):
    """
    Scale a unit fraction by `max_value`; the result carries the sign of `max_value`.

    A zero `max_value` scales by the domain minimum instead, giving a large negative value.
    """
    if not domain.is_finite(max_value):
        raise InvalidRangeError(None, max_value, "Range bounds must be finite")
    if max_value:
        return domain.unit_fraction(source) * max_value
    return domain.unit_fraction(source) * domain.minimum


def next_in_range(source: EntropySource, domain: Domain, min_value, max_value):
    """Returns a value v of the domain with min_value <= v <= max_value."""
    if not (domain.is_finite(min_value) and domain.is_finite(max_value)):
        raise InvalidRangeError(min_value, max_value, "Range bounds must be finite")
    if not min_value <= max_value:
        raise InvalidRangeError(min_value, max_value)

    for _ in range(MAX_ATTEMPTS):
        if min_value < 0:
            candidate = domain.unit_fraction(source) * domain.minimum
        else:
            candidate = next_scaled(source, domain, max_value)

        if min_value <= candidate <= max_value:
            return candidate

    logger.debug(
        f"No {domain.name} candidate accepted after {MAX_ATTEMPTS} attempts, "
        f"using integer fallback for [{min_value}, {max_value}]"
    )
    return _integer_fallback(source, domain, min_value, max_value)


def _integer_fallback(source: EntropySource, domain: Domain, min_value, max_value):
    low = max(math.ceil(min_value), INT64_MIN)
    high = min(math.floor(max_value), INT64_MAX)
    if low <= high:
        return domain.from_int(next_int64(source, low, high + 1))

    # No representable integer inside [min, max]: spread one fraction across the range.
    candidate = min_value + domain.unit_fraction(source) * (max_value - min_value)
    return min(max(candidate, min_value), max_value)
