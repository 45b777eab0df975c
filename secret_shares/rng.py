"""
Random integer providers for polynomial coefficients.

The scheme only needs one operation: "give me a random integer". The
engine derives a nonzero field element from it by rejection sampling and
reduction, so a provider just has to return wide, unpredictable values.

Author: secret-shares contributors
Date: 2026-10-17
"""

import os
import secrets


class RandomGenerator:
    """Interface for random integer providers."""

    def get_random_int(self) -> int:
        raise NotImplementedError


class SecretsGenerator(RandomGenerator):
    """Uniform random integers of `bits` bits from the secrets module."""

    def __init__(self, bits: int = 128):
        if bits < 64:
            raise ValueError(f"Need at least 64 random bits, got {bits}")
        self.bits = bits

    def get_random_int(self) -> int:
        return secrets.randbits(self.bits)


class UrandomGenerator(RandomGenerator):
    """Random integers built from `size` bytes of os.urandom."""

    def __init__(self, size: int = 16):
        if size < 8:
            raise ValueError(f"Need at least 8 random bytes, got {size}")
        self.size = size

    def get_random_int(self) -> int:
        return int.from_bytes(os.urandom(self.size), 'big')
