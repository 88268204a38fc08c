"""Sampling layers used by the SecureRandom facade."""

from .primitives import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UNIT_FRACTION_RESOLUTION,
    fill_bytes,
    next_byte,
    next_bytes,
    next_int32,
    next_int64,
    next_single,
    next_unit_fraction,
    next_unit_fraction_decimal,
)
from .bounded import DECIMAL, DECIMAL_MIN, FLOAT, FLOAT_MIN, MAX_ATTEMPTS, Domain, next_in_range, next_scaled
from .selection import select_items, shuffle

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "UNIT_FRACTION_RESOLUTION",
    "fill_bytes",
    "next_byte",
    "next_bytes",
    "next_int32",
    "next_int64",
    "next_single",
    "next_unit_fraction",
    "next_unit_fraction_decimal",
    "DECIMAL",
    "DECIMAL_MIN",
    "FLOAT",
    "FLOAT_MIN",
    "MAX_ATTEMPTS",
    "Domain",
    "next_in_range",
    "next_scaled",
    "select_items",
    "shuffle",
]
