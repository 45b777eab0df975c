"""
Prime field arithmetic for the secret sharing scheme.

The field is not fixed: the prime is picked from the number of shares
requested, so small share counts produce short shares. Each secret
chunk is `byte_width` bytes wide and the prime is always larger than
256**byte_width, so every chunk value is a field element.

Author: secret-shares contributors
Date: 2026-10-17
"""

import logging
import threading

from .errors import RangeError

logger = logging.getLogger(__name__)


# Smallest tabulated prime above 256**width, keyed by width in bytes
PRIMES = {
    1: 257,
    2: 65537,
    3: 16777259,
    4: 4294967311,
    5: 1099511627791,
    6: 281474976710677,
    7: 72057594037928017,
}

MAX_BYTE_WIDTH = max(PRIMES)

# One byte is always reserved for the prime, so the largest share count
# is what fits in MAX_BYTE_WIDTH bytes.
MAX_SHARES = 1 << (MAX_BYTE_WIDTH * 8)

# 3 is a primitive root of both Fermat primes (257, 65537)
GENERATOR = 3

# Above this a dense inverse table costs more than it saves
DENSE_TABLE_LIMIT = 1 << 17


def byte_width(share_count: int) -> int:
    """Bytes needed to represent share_count (ceil(log2(n) / 8), at least 1)."""
    bits = (share_count - 1).bit_length()
    return max(1, -(-bits // 8))


def select_prime(share_count: int) -> tuple:
    """
    Pick the field prime and chunk width for a share count.

    Args:
        share_count: Number of shares that will be produced

    Returns:
        (prime, byte_width) with prime > 256**byte_width

    Raises:
        RangeError: If the share count is below 1 or too large
    """
    if share_count < 1:
        raise RangeError(f"Number of shares must be at least 1, got {share_count}")
    if share_count > MAX_SHARES:
        raise RangeError(f"Number of shares has to be below {MAX_SHARES:,}")

    width = byte_width(share_count)
    if width not in PRIMES:
        raise RangeError(f"No prime available for {width}-byte chunks")

    prime = PRIMES[width]
    logger.debug("share count %d -> %d-byte chunks, prime %d", share_count, width, prime)
    return prime, width


def modulo(n: int, p: int) -> int:
    """Euclidean remainder, always in [0, p) for positive p."""
    return n % p


def _extended_gcd(a: int, b: int) -> tuple:
    """Extended Euclidean Algorithm. Returns (gcd, x, y) where ax + by = gcd."""
    if a == 0:
        return b, 0, 1
    g, x, y = _extended_gcd(b % a, a)
    return g, y - (b // a) * x, x


def _mod_inv(a: int, p: int) -> int:
    """Modular multiplicative inverse using extended Euclidean algorithm."""
    a = modulo(a, p)
    g, x, _ = _extended_gcd(a, p)
    if g != 1:
        raise ValueError(f"No modular inverse for {a} mod {p}")
    return modulo(x, p)


def build_inverse_table(prime: int, generator: int = GENERATOR) -> list:
    """
    Build table[x] = x^-1 mod prime for every x in [0, prime).

    Walks the cycle of powers of `generator`: when x = g^k the inverse is
    (g^-1)^k, so both sides are advanced by a constant multiplier. For 257
    the multipliers are 3 and 86. table[0] is 0 by convention.

    Raises:
        ValueError: If generator is not a primitive root of prime
    """
    step = _mod_inv(generator, prime)
    table = [0] * prime
    x = y = 1
    for _ in range(prime - 1):
        table[x] = y
        x = modulo(x * generator, prime)
        y = modulo(y * step, prime)

    if 0 in table[1:]:
        raise ValueError(f"{generator} is not a primitive root of {prime}")
    return table


class InverseTable:
    """
    Multiplicative inverses modulo one prime.

    Small primes get the dense table from build_inverse_table(), built on
    first use under a lock and read-only afterwards. Larger primes memoize
    extended-Euclidean results per lookup.
    """

    def __init__(self, prime: int):
        self.prime = prime
        self._table = None
        self._memo = {}
        self._lock = threading.Lock()

    @property
    def dense(self) -> bool:
        return self.prime <= DENSE_TABLE_LIMIT

    def _lookup(self, i: int) -> int:
        if i == 0:
            return 0
        if self.dense:
            if self._table is None:
                with self._lock:
                    if self._table is None:
                        logger.debug("building inverse table for prime %d", self.prime)
                        self._table = build_inverse_table(self.prime)
            return self._table[i]

        inv = self._memo.get(i)
        if inv is None:
            inv = _mod_inv(i, self.prime)
            self._memo[i] = inv
        return inv

    def inverse(self, i: int) -> int:
        """Inverse of i modulo the prime; negative i maps to -inv(-i)."""
        if i < 0:
            return modulo(-self._lookup(modulo(-i, self.prime)), self.prime)
        return self._lookup(modulo(i, self.prime))

    def __getitem__(self, i: int) -> int:
        return self.inverse(i)
