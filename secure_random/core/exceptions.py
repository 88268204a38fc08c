class SecureRandomError(Exception):
    """Base class for contract violations reported by the sampler."""


class InvalidRangeError(SecureRandomError, ValueError):
    def __init__(self, minimum, maximum, message: str = None):
        self.minimum = minimum
        self.maximum = maximum
        if message is None:
            message = f"Invalid range: min {minimum!r} must not exceed max {maximum!r}"
        super().__init__(message)


class EmptyChoiceSetError(SecureRandomError, IndexError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Cannot select {count} item(s) from an empty sequence")
