"""
Exception types for the KBKDF package.

All of them derive from ValueError, since every failure is a rejected
parameter detected before the first PRF invocation.
"""


class KBKDFError(ValueError):
    """Base exception for key derivation parameter errors."""
    pass


class UnsupportedHashAlgorithmError(KBKDFError):
    """Raised when a hash algorithm is not present in the PRF registry."""

    def __init__(self, hash_algorithm):
        self.hash_algorithm = hash_algorithm
        super().__init__(f'Unsupported hash algorithm: "{hash_algorithm}"')


class UnsupportedCounterWidthError(KBKDFError):
    """Raised when the counter width is not one of 8, 16, 24 or 32 bits."""

    def __init__(self, counter_width):
        self.counter_width = counter_width
        super().__init__(f"Unsupported counter width: {counter_width}")


class IterationCountTooHighError(KBKDFError):
    """Raised when the iteration count cannot be represented by the counter."""

    def __init__(self, n: int, max_n: int):
        self.n = n
        self.max_n = max_n
        super().__init__(f"Iteration count is too high: {n} > {max_n}")
