"""
Shamir's Secret Sharing over a dynamically sized prime field.

Splits a secret of any length into N share strings where any K shares
reconstruct the original, but K-1 shares reveal zero information
(information-theoretic security).

The secret is cut into chunks of 1-7 bytes, depending on how many shares
are requested, and each chunk is shared with its own random polynomial.
All chunk values of one share are packed into a single compact string.

Author: secret-shares contributors
Date: 2026-10-17
"""

import logging
import threading

from .codec import CHARS, PAD_CHAR
from .errors import (
    ConfigurationError, DuplicateShareError, EmptyInputError, IncompatibleSharesError,
    InsufficientSharesError, RangeError, ShamirError,
)
from .field import InverseTable, modulo, select_prime
from .polynomial import evaluate, generate_coefficients, reverse_coefficients
from .rng import RandomGenerator, SecretsGenerator
from .share import Share, format_share, parse_share

logger = logging.getLogger(__name__)


def chunk_secret(secret: bytes, byte_width: int) -> list:
    """Cut secret into little-endian integers of byte_width bytes."""
    return [
        int.from_bytes(secret[i:i + byte_width], 'little')
        for i in range(0, len(secret), byte_width)
    ]


class Shamir:
    """
    A secret sharing scheme instance.

    Holds the random provider and one inverse table per prime it has
    recovered with. Tables are built once and only read afterwards, so an
    instance can be shared between threads.
    """

    def __init__(self, random_generator: RandomGenerator = None):
        self._random_generator = random_generator
        self._inverse_tables = {}
        self._lock = threading.Lock()

    @property
    def random_generator(self) -> RandomGenerator:
        if self._random_generator is None:
            self._random_generator = SecretsGenerator()
        return self._random_generator

    @random_generator.setter
    def random_generator(self, generator: RandomGenerator):
        self._random_generator = generator

    def inverse_table(self, prime: int) -> InverseTable:
        """The inverse table for prime, created on first request."""
        table = self._inverse_tables.get(prime)
        if table is None:
            with self._lock:
                table = self._inverse_tables.setdefault(prime, InverseTable(prime))
        return table

    def split(self, secret: bytes, share_count: int, threshold: int = 2) -> list:
        """
        Split a secret into share_count shares, requiring threshold to recover.

        Args:
            secret: The secret bytes to split (any length)
            share_count: Total number of shares to generate
            threshold: Minimum shares needed to reconstruct

        Returns:
            List of share_count share strings, index 1 first

        Raises:
            RangeError: If share_count or threshold are out of range
            ConfigurationError: If the pad symbol is part of the alphabet
        """
        if not isinstance(secret, (bytes, bytearray)):
            raise TypeError(f"Secret must be bytes, got {type(secret).__name__}")

        prime, byte_width = select_prime(share_count)

        # the prime must exceed the largest x coordinate
        if share_count >= prime:
            raise RangeError(f"Number of shares has to be between 1 and {prime - 1}")
        if not 2 <= threshold <= share_count:
            raise RangeError(
                f"Threshold has to be between 2 and {share_count}, got {threshold}"
            )
        if PAD_CHAR in CHARS:
            raise ConfigurationError("Padding character must not be part of the share alphabet")

        generator = self.random_generator
        values = [[] for _ in range(share_count)]
        for chunk in chunk_secret(secret, byte_width):
            coefficients = generate_coefficients(threshold, prime, generator)
            coefficients.append(chunk)
            for x in range(1, share_count + 1):
                values[x - 1].append(evaluate(x, coefficients, prime))

        padding = -len(secret) % byte_width
        logger.debug("split %d bytes into %d shares (threshold %d, %d-byte chunks)",
                     len(secret), share_count, threshold, byte_width)

        return [
            format_share(Share(byte_width, threshold, x, values[x - 1], padding))
            for x in range(1, share_count + 1)
        ]

    def recover(self, shares: list) -> bytes:
        """
        Reconstruct the secret from share strings using Lagrange interpolation.

        Only the first `threshold` shares are used; extra shares are parsed
        and checked for compatibility but do not enter the computation.

        Args:
            shares: Share strings produced by split()

        Returns:
            The original secret bytes

        Raises:
            EmptyInputError: If no shares are given
            MalformedShareError: If a share cannot be parsed
            IncompatibleSharesError: If shares do not belong together
            InsufficientSharesError: If fewer shares than the threshold
            DuplicateShareError: If two shares carry the same index
        """
        if not shares:
            raise EmptyInputError("No shares given")

        parsed = [parse_share(s) for s in shares]
        first = parsed[0]
        for share in parsed[1:]:
            if share.layout != first.layout:
                raise IncompatibleSharesError(
                    f"Share {share.index} is incompatible with share {first.index}"
                )

        indices = [s.index for s in parsed]
        if len(set(indices)) != len(indices):
            repeated = sorted({i for i in indices if indices.count(i) > 1})
            raise DuplicateShareError(f"Repeated share index: {repeated}")

        threshold = first.threshold
        if len(parsed) < threshold:
            raise InsufficientSharesError(
                f"Need at least {threshold} shares, got {len(parsed)}"
            )

        byte_width = first.byte_width
        prime = first.prime
        used = parsed[:threshold]
        weights = reverse_coefficients(
            [s.index for s in used], threshold, self.inverse_table(prime)
        )

        limit = 1 << (byte_width * 8)
        secret = bytearray()
        for chunk in range(len(first.values)):
            value = 0
            for share, weight in zip(used, weights):
                value = modulo(value + share.values[chunk] * weight, prime)
            if value >= limit:
                raise IncompatibleSharesError(
                    "Reconstructed value does not fit the chunk width; "
                    "shares do not belong to the same secret"
                )
            secret += value.to_bytes(byte_width, 'little')

        if first.padding:
            del secret[-first.padding:]

        logger.debug("recovered %d bytes from %d shares", len(secret), len(parsed))
        return bytes(secret)


_default = None


def _default_scheme() -> Shamir:
    global _default
    if _default is None:
        _default = Shamir()
    return _default


def split(secret: bytes, share_count: int, threshold: int = 2) -> list:
    """Split a secret with the default scheme instance. See Shamir.split."""
    return _default_scheme().split(secret, share_count, threshold)


def recover(shares: list) -> bytes:
    """Recover a secret with the default scheme instance. See Shamir.recover."""
    return _default_scheme().recover(shares)


def verify_shares(shares: list) -> dict:
    """
    Check a set of shares without reconstructing the secret.

    Returns dict with:
        - valid: bool (all shares parse, agree and have distinct indices)
        - recoverable: bool (valid and at least threshold shares)
        - byte_width: chunk width of the first valid share
        - threshold: declared threshold of the first valid share
        - share_count: how many valid shares
        - indices: list of share indices
        - errors: list of error messages for invalid shares
    """
    result = {
        'valid': True,
        'recoverable': False,
        'byte_width': None,
        'threshold': None,
        'share_count': 0,
        'indices': [],
        'errors': [],
    }

    if not shares:
        result['valid'] = False
        result['errors'].append("No shares given")
        return result

    layout = None
    for i, share_str in enumerate(shares):
        try:
            share = parse_share(share_str)
        except ShamirError as e:
            result['errors'].append(f"Share {i+1}: {e}")
            result['valid'] = False
            continue

        if layout is None:
            layout = share.layout
            result['byte_width'] = share.byte_width
            result['threshold'] = share.threshold
        elif share.layout != layout:
            result['errors'].append(f"Share {i+1}: incompatible with the first share")
            result['valid'] = False
            continue

        if share.index in result['indices']:
            result['errors'].append(f"Share {i+1}: repeated index {share.index}")
            result['valid'] = False
            continue

        result['indices'].append(share.index)
        result['share_count'] += 1

    result['recoverable'] = (
        result['valid'] and result['threshold'] is not None
        and result['share_count'] >= result['threshold']
    )
    return result
