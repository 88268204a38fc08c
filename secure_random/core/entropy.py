"""
Entropy sources consumed by the samplers.
Anything with the three methods of `EntropySource` can be injected into `SecureRandom`.
"""

import secrets
from typing import Protocol, runtime_checkable

from secure_random.core.logger import get_logger

logger = get_logger("entropy")


@runtime_checkable
class EntropySource(Protocol):
    def bytes(self, n: int) -> bytes:
        """Return `n` unpredictable bytes."""
        ...

    def uniform_int32(self, low: int, high_exclusive: int) -> int:
        """Return an integer uniformly distributed over [low, high_exclusive)."""
        ...

    def uniform_int64(self, low: int, high_exclusive: int) -> int:
        """Return an integer uniformly distributed over [low, high_exclusive)."""
        ...


class SystemEntropySource:
    """
    A wrapper around Python's `secrets` module, backed by the OS CSPRNG.
    Errors raised by `secrets` are fatal and are not caught here.
    """

    def __init__(self):
        logger.debug("Using secrets module as entropy source")

    def bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Byte count must be non-negative")
        return secrets.token_bytes(n)

    def uniform_int32(self, low: int, high_exclusive: int) -> int:
        # secrets.randbelow(n) returns [0, n) without modulo bias
        return low + secrets.randbelow(high_exclusive - low)

    def uniform_int64(self, low: int, high_exclusive: int) -> int:
        return low + secrets.randbelow(high_exclusive - low)
